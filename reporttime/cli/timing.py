"""Timing commands registered on the top-level app."""

import shlex

import typer

from reporttime.api.timing.ClockSampler import ClockSampler
from reporttime.api.timing.cmd_calibrate import cmd_calibrate
from reporttime.api.timing.cmd_format import cmd_format
from reporttime.api.timing.cmd_report import cmd_report
from reporttime.cli._handle_stage_result import _handle_stage_result


def _print_overhead(output: dict) -> None:
    if output["overhead"]:
        typer.echo(output["overhead"])


def _print_shell_assignments(output: dict) -> None:
    """Print ``name=value`` lines for eval by the shell hooks."""
    for name, value in output["variables"].items():
        typer.echo(f"{name}={shlex.quote(value)}")
    if output["report"]:
        typer.echo(f"echo {shlex.quote(output['report_line'])}")
    for error in output["errors"]:
        typer.echo(f"reporttime: {error}", err=True)


def register_timing_commands(app: typer.Typer) -> None:
    """Attach the timing commands to ``app``."""

    @app.command(name="now")
    def now_cmd() -> None:
        """Print the current time in seconds with nanosecond digits."""
        typer.echo(ClockSampler().now_text())

    @app.command(name="format")
    def format_cmd(
        seconds: str = typer.Argument(..., help="Duration in seconds, e.g. 10934.1"),
        precision: int | None = typer.Option(None, "--precision", "-p", help="Fractional-second digits (0-9)"),
    ) -> None:
        """Pretty-print a duration as Xdays, HH:MM:SS.ddd."""
        _handle_stage_result(cmd_format)(seconds, precision=precision)

    @app.command(name="calibrate")
    def calibrate_cmd(
        loops: int | None = typer.Option(None, "--loops", "-n", help="Number of clock samples"),
        spawn: bool = typer.Option(False, "--spawn", help="Sample by spawning 'reporttime now' like the shell hooks"),
        print_overhead: bool = typer.Option(False, "--print-overhead", help="Print only the overhead in seconds"),
    ) -> None:
        """Measure the average cost of taking one timestamp."""
        if print_overhead:
            _handle_stage_result(cmd_calibrate, result_printer=_print_overhead, suppress_output=True)(
                loops=loops, spawn=spawn
            )
        else:
            _handle_stage_result(cmd_calibrate)(loops=loops, spawn=spawn)

    @app.command(name="report")
    def report_cmd(
        start: str = typer.Option(..., "--start", help="Start timestamp in seconds; 0 disables timing"),
        stop: str = typer.Option(..., "--stop", help="Stop timestamp in seconds"),
        overhead: str = typer.Option("0", "--overhead", help="Calibrated per-sample overhead in seconds"),
        threshold: str | None = typer.Option(None, "--threshold", help="Report threshold in seconds, or 'no'"),
        precision: int | None = typer.Option(None, "--precision", help="Fractional-second digits (0-9)"),
    ) -> None:
        """Finish timing a shell command; prints variable assignments for eval."""
        _handle_stage_result(cmd_report, result_printer=_print_shell_assignments, suppress_output=True)(
            start=start,
            stop=stop,
            overhead=overhead,
            threshold=threshold,
            precision=precision,
        )
