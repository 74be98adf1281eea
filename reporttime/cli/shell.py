"""Shell integration commands."""

import typer

from reporttime.api.config.load_config_with_warnings import load_config_with_warnings
from reporttime.api.repl.TimedConsole import TimedConsole
from reporttime.api.shell.cmd_init import cmd_init
from reporttime.api.timing.CommandTimer import CommandTimer
from reporttime.cli._handle_stage_result import _handle_stage_result
from reporttime.utils.get_package_version import get_package_version
from reporttime.utils.logger import configure_logging


def _print_script(output: dict) -> None:
    for error in output["errors"]:
        typer.echo(f"reporttime: {error}", err=True)
    if output["script"]:
        typer.echo(output["script"], nl=False)


def register_shell_commands(app: typer.Typer) -> None:
    """Attach the host integration commands to ``app``."""

    @app.command(name="init")
    def init_cmd(
        shell: str = typer.Argument(..., help="Shell to integrate with: bash or zsh"),
    ) -> None:
        """Print the hook script; load it with eval "$(reporttime init bash)"."""
        _handle_stage_result(cmd_init, result_printer=_print_script, suppress_output=True)(shell)

    @app.command(name="repl")
    def repl_cmd() -> None:
        """Start a Python console that reports slow statements."""
        config, warnings = load_config_with_warnings()
        for warning in warnings:
            typer.echo(f"reporttime: {warning}", err=True)
        configure_logging(level=config.log_level)
        console = TimedConsole(CommandTimer(config))
        console.interact(
            banner=(
                f"reporttime {get_package_version()} Python console; "
                f"type {config.bypass_command} to show the last timing"
            ),
            exitmsg="",
        )
