# EmployeeRoster.py
import readline
import sys

from roster.core import InputClosed, init_core
from roster.menu import MENU_COMMANDS, Menu, MenuOption
from roster.model.schema import BANNER, QUIT_TEXT


def main(core=None):
    core = core or init_core()
    menu = Menu(MENU_COMMANDS)
    core.say(BANNER)

    while True:
        try:
            choice = menu.choose(core)
            if choice is MenuOption.QUIT:
                core.say(QUIT_TEXT)
                break
            res = menu.run(core, choice)
        except KeyboardInterrupt:
            print()
            break
        except InputClosed as e:
            print(str(e), file=sys.stderr)
            return 1
        if res is not None:
            core.say(res)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
