"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import TypeVar

from jtops.api.validate_output import validate_output

from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    result_printer: Callable[[dict, CLIDisplay], None] | None = None,
) -> None:
    """Run command once, display the result, and exit.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.progress(progress_percent, message)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        # Validation failure is a programming error - fail loudly
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output, display)

    sys.exit(0 if result.success else 1)
