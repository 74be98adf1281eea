"""Interactive Python console that times each statement."""

import code
from typing import Any

from ..timing.CommandTimer import CommandTimer


class TimedConsole(code.InteractiveConsole):
    """``code.InteractiveConsole`` with REPORTTIME behaviour.

    Every complete statement is timed; incomplete input is not. Entering the
    bypass command (``timelast`` by default) prints the previous report instead
    of evaluating the line, so a variable with that name cannot be inspected by
    typing its bare name.
    """

    def __init__(self, timer: CommandTimer, locals: dict[str, Any] | None = None, filename: str = "<console>"):
        super().__init__(locals=locals, filename=filename)
        self.timer = timer
        self._source = ""

    def runsource(self, source: str, filename: str = "<input>", symbol: str = "single") -> bool:
        if source.strip() == self.timer.config.bypass_command:
            self.timer.before_command(source)
            self.timer.show_last()
            self.timer.after_command()
            return False
        self._source = source
        return super().runsource(source, filename, symbol)

    def runcode(self, code: Any) -> None:
        self.timer.before_command(self._source)
        try:
            super().runcode(code)
        finally:
            self.timer.after_command()
