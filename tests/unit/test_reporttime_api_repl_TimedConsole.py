"""Unit tests for reporttime.api.repl.TimedConsole."""

import io

import pytest

from reporttime.api.repl.TimedConsole import TimedConsole
from tests.conftest import make_timer

pytestmark = pytest.mark.repl


class TestTimedConsole:
    def test_statement_is_timed_and_reported(self):
        stream = io.StringIO()
        namespace = {}
        timer = make_timer(1, "3.5", stream=stream, threshold=0)
        console = TimedConsole(timer, namespace)
        assert console.push("x = 40 + 2") is False
        assert namespace["x"] == 42
        assert timer.last.pretty == "2.500"
        assert stream.getvalue() == "real 2.500s\n"

    def test_bypass_shows_last_without_timing(self):
        stream = io.StringIO()
        timer = make_timer(1, "3.5", 100, 200, stream=stream, threshold="no")
        console = TimedConsole(timer, {})
        console.push("y = 1")
        previous = timer.last
        console.push("timelast")
        console.push("timelast")
        assert timer.last is previous
        assert stream.getvalue() == "real 2.500s\nreal 2.500s\n"

    def test_incomplete_input_is_not_timed(self):
        timer = make_timer(1, 5, threshold="no")
        console = TimedConsole(timer, {})
        assert console.push("for i in range(2):") is True
        assert not timer.running
        assert console.push("    pass") is True
        assert console.push("") is False
        assert timer.last.pretty == "4.000"

    def test_exception_still_timed(self, capsys):
        timer = make_timer(1, 2, threshold="no")
        console = TimedConsole(timer, {})
        console.push("1 / 0")
        assert "ZeroDivisionError" in capsys.readouterr().err
        assert timer.last.pretty == "1.000"
        assert not timer.running
