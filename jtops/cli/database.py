"""Database Typer app factory and report printer."""

import typer

from jtops.api.database.cmd_check import cmd_check
from jtops.cli._handle_stage_result import handle_stage_result
from jtops.cli.display import CLIDisplay
from jtops.error_messages import mongodb_connection_error


def _print_check(output: dict, display: CLIDisplay) -> None:
    display.report(f"📍 URI: {output['target']}")
    if output["errors"]:
        mongodb_connection_error(output["errors"][0], output["tips"])
        return
    collections = output["collections"]
    lines = [
        "",
        "✅ SUCCESS: MongoDB Connected!",
        f"🌐 Host: {output['host']}",
        f"🗄️  Database: {output['database']}",
        f"🔗 Connection State: {output['ready_state']}",
        f"📚 Collections found: {len(collections)}",
    ]
    if collections:
        lines.append("📋 Collection names:")
        lines.extend(f"   - {name}" for name in collections)
    if output["closed"]:
        lines.extend(["", "🔄 Connection closed successfully"])
    display.report(*lines)


def check_command() -> None:
    """Connect to MongoDB once, list collections, and close."""
    handle_stage_result(cmd_check, _print_check)()


def database() -> typer.Typer:
    """Create and configure the database Typer app."""
    app = typer.Typer(
        name="database",
        help="Database operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Database operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    app.command(name="check")(check_command)

    return app
