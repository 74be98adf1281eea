"""Unit tests for the reporttime.ipython extension."""

import io
from types import SimpleNamespace

import pytest

from reporttime import ipython
from tests.conftest import make_timer

pytestmark = pytest.mark.repl


class FakeEvents:
    def __init__(self):
        self.callbacks = {"pre_run_cell": [], "post_run_cell": []}

    def register(self, name, func):
        self.callbacks[name].append(func)

    def unregister(self, name, func):
        self.callbacks[name].remove(func)


class FakeShell:
    """Just enough of InteractiveShell to drive the extension."""

    def __init__(self):
        self.events = FakeEvents()
        self.magics = {}

    def register_magic_function(self, func, magic_kind="line", magic_name=None):
        self.magics[magic_name] = func

    def run_cell(self, raw_cell: str) -> None:
        for callback in self.events.callbacks["pre_run_cell"]:
            callback(SimpleNamespace(raw_cell=raw_cell))
        if raw_cell.startswith("%"):
            self.magics[raw_cell[1:].strip()]("")
        for callback in self.events.callbacks["post_run_cell"]:
            callback(SimpleNamespace(success=True))


@pytest.fixture
def shell():
    ip = FakeShell()
    yield ip
    ipython.unload_ipython_extension(ip)


class TestIPythonExtension:
    def test_cells_are_timed(self, shell):
        stream = io.StringIO()
        timer = ipython.load_ipython_extension(shell, timer=make_timer(1, "7.25", stream=stream, threshold=5))
        shell.run_cell("train()")
        assert timer.last.pretty == "6.250"
        assert stream.getvalue() == "real 6.250s\n"

    def test_magic_shows_last_without_timing(self, shell):
        stream = io.StringIO()
        timer = ipython.load_ipython_extension(shell, timer=make_timer(1, "2.5", 50, stream=stream, threshold="no"))
        shell.run_cell("x = 1")
        previous = timer.last
        shell.run_cell("%timelast")
        assert timer.last is previous
        assert stream.getvalue() == "real 1.500s\n"

    def test_load_twice_keeps_one_registration(self, shell):
        timer = ipython.load_ipython_extension(shell, timer=make_timer())
        assert ipython.load_ipython_extension(shell) is timer
        assert len(shell.events.callbacks["pre_run_cell"]) == 1

    def test_unload_removes_callbacks(self, shell):
        ipython.load_ipython_extension(shell, timer=make_timer())
        ipython.unload_ipython_extension(shell)
        assert shell.events.callbacks == {"pre_run_cell": [], "post_run_cell": []}

    def test_default_timer_from_environment(self, shell, monkeypatch):
        monkeypatch.setenv("REPORTTIME", "no")
        timer = ipython.load_ipython_extension(shell)
        assert timer.config.never_reports
