"""CLI - main entry points."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_level() -> int:
    level = logging.getLevelName(os.environ.get("JTOPS_LOG_LEVEL", "WARNING").upper())
    # Unknown names come back as "Level <name>"
    return level if isinstance(level, int) else logging.WARNING


def _run_app(app, argv: list[str]) -> int:
    import typer

    logging.basicConfig(level=_log_level(), format=LOG_FORMAT)

    # Standalone mode: usage errors and normal completion leave through SystemExit
    try:
        app(argv)
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point (``jtops``)."""
    from jtops.cli._create_app import _create_app
    from jtops.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"jtops {get_package_version()}")
        return 0

    return _run_app(_create_app(), argv)


def generate_secrets(argv: list[str] | None = None) -> int:
    """Zero-argument entry point (``jtops-generate-secrets``)."""
    from jtops.cli._create_app import _create_single_command_app
    from jtops.cli.secrets import secrets_command

    return _run_app(_create_single_command_app(secrets_command), sys.argv[1:] if argv is None else argv)


def check_db(argv: list[str] | None = None) -> int:
    """Zero-argument entry point (``jtops-test-db``)."""
    from jtops.cli._create_app import _create_single_command_app
    from jtops.cli.database import check_command

    return _run_app(_create_single_command_app(check_command), sys.argv[1:] if argv is None else argv)
