"""IPython extension: ``%load_ext reporttime.ipython``.

Times every executed cell and reports the slow ones. ``%timelast`` (or the
configured bypass command) prints the previous report.
"""

from typing import Any

from .api.timing.CommandTimer import CommandTimer

# id(shell) -> (timer, pre_run_cell, post_run_cell)
_REGISTERED: dict[int, tuple[CommandTimer, Any, Any]] = {}


def load_ipython_extension(ip: Any, timer: CommandTimer | None = None) -> CommandTimer:
    if id(ip) in _REGISTERED:
        return _REGISTERED[id(ip)][0]

    timer = timer or CommandTimer.from_environment()

    def pre_run_cell(info: Any) -> None:
        # "%timelast" and "timelast" are the same command
        timer.before_command(info.raw_cell.strip().lstrip("%"))

    def post_run_cell(result: Any) -> None:  # noqa: ARG001
        timer.after_command()

    def show_last(line: str = "") -> None:  # noqa: ARG001
        timer.show_last()

    ip.events.register("pre_run_cell", pre_run_cell)
    ip.events.register("post_run_cell", post_run_cell)
    ip.register_magic_function(show_last, magic_kind="line", magic_name=timer.config.bypass_command)
    _REGISTERED[id(ip)] = (timer, pre_run_cell, post_run_cell)
    return timer


def unload_ipython_extension(ip: Any) -> None:
    entry = _REGISTERED.pop(id(ip), None)
    if entry is None:
        return
    _, pre_run_cell, post_run_cell = entry
    ip.events.unregister("pre_run_cell", pre_run_cell)
    ip.events.unregister("post_run_cell", post_run_cell)
