# roster/menu.py
#
# User never invokes sys.* directly.
# A numbered menu choice maps to a MenuOption, and each option maps to an
# internal sys.roster.* primitive.

from __future__ import annotations

import re
from enum import Enum

from roster.model.schema import COMMAND_PROMPT, DEPARTMENT_PROMPT, MENU_LINES


class MenuOption(Enum):
    ADD_PERSON = 1
    PEOPLE_IN_DEPARTMENT = 2
    PEOPLE_IN_COMPANY = 3
    QUIT = 4
    UNKNOWN = 0


DIGITS = re.compile(r"\+?[0-9]+")


MENU_COMMANDS = {
    MenuOption.ADD_PERSON:           "sys.roster.assign",
    MenuOption.PEOPLE_IN_DEPARTMENT: "sys.roster.dept",
    MenuOption.PEOPLE_IN_COMPANY:    "sys.roster.all",
}


def parse_choice(text: str) -> MenuOption:
    """Map a raw menu line to an option; anything unparseable is UNKNOWN."""
    # unsigned ASCII digits only
    text = text.strip()
    if not DIGITS.fullmatch(text):
        return MenuOption.UNKNOWN
    n = int(text)
    try:
        return MenuOption(n)
    except ValueError:
        return MenuOption.UNKNOWN


class Menu:
    def __init__(self, commands):
        self.commands = dict(commands)

    def choose(self, core) -> MenuOption:
        for line in MENU_LINES:
            core.say(line)
        return parse_choice(core.read_line("Failed to read menu option"))

    def run(self, core, option: MenuOption):
        """Gather the option's input and execute its command; returns output text."""
        cmd = self.commands.get(option)
        if cmd is None:
            return None

        if option is MenuOption.ADD_PERSON:
            core.say(COMMAND_PROMPT)
            words = core.read_line("Failed to read command").split()
            return core.execute([cmd, *words])

        if option is MenuOption.PEOPLE_IN_DEPARTMENT:
            core.say(DEPARTMENT_PROMPT)
            dept = core.read_line("Failed to read command").strip()
            return core.execute([cmd, dept])

        return core.execute([cmd])
