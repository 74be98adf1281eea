"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any

from reporttime.api.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict[str, Any],
    display: Display,
    display_format: str,
    result_printer: Callable[[dict], None] | None = None,
    suppress_output: bool = False,
) -> None:
    """Run ``func`` once, show its stages and exit with its success code.

    Commands report failures inside their output schema, so any exception
    raised here is a bug and propagates.
    """
    result = func(*args, **kwargs)

    if not suppress_output:
        display.status(result.announce)

    for progress_percent, message in result.progress_callback(result):
        if not suppress_output:
            display.info(f"Progress: {message} ({progress_percent:.0%})")

    output = validate_output(func, result.output)

    if not suppress_output:
        for warning in output["warnings"]:
            display.warning(warning)
        if result.success:
            display.success(result.result)
        else:
            display.error(result.result)

    if result_printer:
        result_printer(output)
    elif not suppress_output:
        display.json_output(output, format=display_format)

    sys.exit(0 if result.success else 1)
