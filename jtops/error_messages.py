"""Helpful error messages for common jtops failure modes."""

import sys


def _emit_error(*lines: str) -> None:
    """Write error message lines to STDERR."""
    for line in lines:
        sys.stderr.write(line + "\n")


def mongodb_connection_error(message: str, tips: list[str]) -> None:
    """Display the failure message and numbered troubleshooting tips.

    Args:
        message: The underlying driver error message
        tips: Troubleshooting tips, printed in order
    """
    _emit_error(
        "",
        "❌ ERROR: Failed to connect to MongoDB",
        f"💬 Error: {message}",
        "",
        "💡 Troubleshooting tips:",
        *(f"   {number}. {tip}" for number, tip in enumerate(tips, start=1)),
    )


def random_source_error(message: str) -> None:
    """Display the diagnostic for an unavailable cryptographic random source."""
    _emit_error(
        "",
        "❌ ERROR: Secure random source unavailable",
        f"💬 Error: {message}",
        "",
        "No secrets were generated. A weaker random source is never substituted.",
    )
