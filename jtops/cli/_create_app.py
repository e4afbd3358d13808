"""Create the Typer CLI apps."""

from collections.abc import Callable

import typer

from jtops.cli.database import database
from jtops.cli.secrets import secrets_command


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="jtops CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.command(name="secrets")(secrets_command)
    app.add_typer(database(), name="database")

    @app.callback(invoke_without_command=True)
    def main_callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app


def _create_single_command_app(command: Callable[[], None]) -> typer.Typer:
    """Create a Typer app that runs one zero-argument command directly."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )
    app.command()(command)
    return app
