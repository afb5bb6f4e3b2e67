from EmployeeRoster import main
from roster.menu import MenuOption, parse_choice


def test_parse_choice():
    assert parse_choice("1") is MenuOption.ADD_PERSON
    assert parse_choice(" 2 \n") is MenuOption.PEOPLE_IN_DEPARTMENT
    assert parse_choice("3") is MenuOption.PEOPLE_IN_COMPANY
    assert parse_choice("4") is MenuOption.QUIT
    assert parse_choice("+1") is MenuOption.ADD_PERSON
    assert parse_choice("004") is MenuOption.QUIT


def test_parse_choice_unknown():
    for text in ("", "0", "5", "-1", "abc", "1.0", "1 2", "0_4", "\u0664", "+"):
        assert parse_choice(text) is MenuOption.UNKNOWN


def test_quit(console):
    con, core = console("4")
    assert main(core) == 0
    assert con.out[0] == "\n*** Employee Management ***"
    assert con.out[-1] == "Quit"


def test_unknown_choice_reprompts(console):
    con, core = console("x", "9", "", "4")
    before = dict(core.table)
    assert main(core) == 0
    assert con.out.count("Enter 1 - 4") == 4
    assert core.table == before
    assert core.log == []


def test_session_assign_and_query(console):
    con, core = console(
        "1", "add Bob to HR",
        "2", "  HR  ",
        "3",
        "4",
    )
    assert main(core) == 0
    assert "Enter a command:" in con.out
    assert "Found name: Bob and dept: HR" in con.out
    assert "Enter a department: " in con.out
    assert "Searching for dept: HR\n\nFound 1 people in HR\nBob" in con.out
    assert "Aaron\nAmir\nBob\nSally\nZara" in con.out
    assert core.table["Bob"] == "HR"


def test_session_invalid_command(console):
    con, core = console("1", "add Bob HR", "4")
    assert main(core) == 0
    assert "Invalid command, enter: action name to dept" in con.out
    assert core.table["Bob"] == "Engineering"


def test_end_of_input_is_fatal(console, capsys):
    con, core = console("1")
    assert main(core) == 1
    assert "Failed to read command" in capsys.readouterr().err


def test_end_of_input_at_menu(console, capsys):
    con, core = console()
    assert main(core) == 1
    assert "Failed to read menu option" in capsys.readouterr().err


def test_digit_group_choice_does_not_quit(console):
    con, core = console("0_4", "4")
    assert main(core) == 0
    assert con.out.count("Enter 1 - 4") == 2


def test_ctrl_c_ends_session(capsys):
    from roster.core import init_core

    def interrupt():
        raise KeyboardInterrupt

    out = []
    core = init_core(reader=interrupt, writer=out.append)
    assert main(core) == 0
    assert "Quit" not in out
    assert capsys.readouterr().out == "\n"
