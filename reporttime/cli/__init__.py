"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from reporttime.cli._create_app import _create_app
    from reporttime.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if argv and argv[0] in ("--version", "-v"):
        print(f"reporttime {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="reporttime")
        return 0
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
