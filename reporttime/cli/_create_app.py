"""Create the main Typer CLI app."""

import typer

from reporttime.cli.config import config
from reporttime.cli.shell import register_shell_commands
from reporttime.cli.timing import register_timing_commands


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Report the wall-clock time of slow shell commands",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    register_timing_commands(app)
    register_shell_commands(app)
    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        # Store display format in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
