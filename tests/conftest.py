import pytest

from roster.core import init_core


class ScriptedConsole:
    """Feeds canned input lines and captures everything said."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.out = []

    def read(self):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def write(self, text):
        self.out.append(text)

    @property
    def text(self):
        return "\n".join(self.out)


@pytest.fixture
def core():
    return init_core()


@pytest.fixture
def console():
    def _make(*lines):
        con = ScriptedConsole(lines)
        return con, init_core(reader=con.read, writer=con.write)
    return _make
