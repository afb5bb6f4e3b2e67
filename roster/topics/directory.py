# roster/topics/directory.py
#
# Internal sys.roster.* primitives over the assignment table.
# User reaches these only through the numbered menu (see roster/menu.py).
#
# Handlers return console text; they never read input themselves.

from roster.lib import assignments as asg

INVALID_COMMAND = "Invalid command, enter: action name to dept"


def assign(core, *words):
    """sys.roster.assign <action> <name> <to> <dept>"""
    if len(words) != 4:
        return INVALID_COMMAND

    name = words[1] if len(words) > 1 else ""
    dept = words[3] if len(words) > 3 else ""

    if asg.is_valid(name, dept, core.employees, core.departments):
        asg.assign(core.table, name, dept)
        return f"Found name: {name} and dept: {dept}"
    return f"Didn't find name: {name} or dept: {dept}"


def people_in_dept(core, dept=""):
    dept = dept.strip()
    lines = [f"Searching for dept: {dept}"]

    # checked against the fixed list, not the departments in use
    if dept not in core.departments:
        lines.append(f"Didn't find dept: {dept}")
        return "\n".join(lines)

    people = asg.members(core.table, dept)
    lines.append(f"\nFound {len(people)} people in {dept}")
    lines.extend(name for name, _ in people)
    return "\n".join(lines)


def all_people(core):
    people = asg.names(core.table)
    if not people:
        return None
    return "\n".join(people)


COMMANDS = {
    "sys.roster.assign": assign,
    "sys.roster.dept":   people_in_dept,
    "sys.roster.all":    all_people,
}
