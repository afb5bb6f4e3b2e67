"""roster/core.py

Core runtime + init_core() wiring.
"""

from __future__ import annotations

from roster.model.schema import SEED_ASSIGNMENTS, VALID_DEPARTMENTS, VALID_EMPLOYEES, seed_table
from roster.topics import ALL_COMMANDS


class InputClosed(RuntimeError):
    """The console input stream ended; the session cannot continue."""


class Core:
    def __init__(self, employees, departments, table, reader=None, writer=None):
        # validation lists are fixed for the whole run; only the table mutates
        self.employees = tuple(employees)
        self.departments = tuple(departments)
        self.table = table

        self.commands = {}   # cmd -> handler
        self.log = []

        self._reader = reader or input
        self._writer = writer or print

    def register(self, name, handler):
        self.commands[name] = handler

    def execute(self, parts):
        parts = list(parts)
        self.log.append({"in": parts})
        if not parts:
            return None

        cmd, *args = parts
        handler = self.commands.get(cmd)
        if not handler:
            out = f"Unknown command: {cmd}"
            self.log.append({"out": out})
            return out

        try:
            out = handler(self, *args)
        except ValueError as e:
            out = f"Error: {e}"

        self.log.append({"out": out})
        return out

    # ---- console ----
    def say(self, text):
        self._writer(text)

    def read_line(self, context="Failed to read input"):
        try:
            return self._reader()
        except EOFError as e:
            raise InputClosed(context) from e


def init_core(config=None, reader=None, writer=None):
    cfg = dict(config or {})

    employees = cfg.get("employees", VALID_EMPLOYEES)
    departments = cfg.get("departments", VALID_DEPARTMENTS)
    table = seed_table(cfg.get("assignments", SEED_ASSIGNMENTS))

    core = Core(employees, departments, table, reader=reader, writer=writer)

    # register internal primitives
    for name, handler in ALL_COMMANDS.items():
        core.register(name, handler)

    return core
