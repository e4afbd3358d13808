"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution
from .display import CLIDisplay

F = TypeVar("F", bound=Callable)


def handle_stage_result(
    func: F,
    result_printer: Callable[[dict, CLIDisplay], None] | None = None,
) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (result_printer renders the report)

    Args:
        func: Function that returns StageResult
        result_printer: Renders the validated output dict

    Returns:
        Wrapped function that handles display and exits with appropriate code
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), result_printer)

    return wrapper  # type: ignore[return-value]
