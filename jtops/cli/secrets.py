"""Secrets command and report printer."""

from jtops.api.secrets.cmd_generate import cmd_generate
from jtops.cli._handle_stage_result import handle_stage_result
from jtops.cli.display import CLIDisplay
from jtops.error_messages import random_source_error


def _print_secrets(output: dict, display: CLIDisplay) -> None:
    if output["errors"]:
        random_source_error(output["errors"][0])
        return
    display.report(
        "🔐 Secure secrets for your application",
        "",
        f"{output['primary_name']}:",
        output["primary"],
        "",
        f"{output['secondary_name']}:",
        output["secondary"],
        "",
        "📋 Copy these values to your Vercel environment variables:",
        *(f"{number}. {step}" for number, step in enumerate(output["instructions"], start=1)),
        "",
        f"⚠️  {output['reminder']}",
    )


def secrets_command() -> None:
    """Generate a 64-character and a 32-character hex secret."""
    handle_stage_result(cmd_generate, _print_secrets)()
