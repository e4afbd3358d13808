"""Check database connectivity command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import DatabaseCheckOutput
from .Probe import Probe
from .ProbeConfig import ProbeConfig
from .ProbeError import ProbeError
from .ReadyState import ReadyState
from .TROUBLESHOOTING_TIPS import TROUBLESHOOTING_TIPS


def cmd_check() -> StageResult:
    """Connect to MongoDB once, list collections, and close.

    Returns:
        StageResult with the connection report, or the failure and troubleshooting tips
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.1, "Resolving connection settings...")
        config = ProbeConfig.from_env()

        yield (0.2, f"URI: {config.display_target}")
        yield (0.3, "Attempting to connect...")
        probe = Probe(config)
        try:
            with probe:
                report = probe.report()
        except ProbeError as e:
            yield (1.0, "Complete")
            result_obj.result = "Failed to connect to MongoDB"
            result_obj.output = DatabaseCheckOutput(
                errors=[str(e)],
                warnings=[],
                uri_source=config.source,
                target=config.display_target,
                host="",
                database="",
                ready_state=ReadyState.DISCONNECTED.label,
                collections=[],
                closed=probe.closed,
                failure_kind=e.kind.value,
                tips=list(TROUBLESHOOTING_TIPS),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "MongoDB Connected!"
        result_obj.output = DatabaseCheckOutput(
            errors=[],
            warnings=[],
            uri_source=config.source,
            target=config.display_target,
            host=report.host,
            database=report.database,
            ready_state=report.ready_state.label,
            collections=report.collections,
            closed=probe.closed,
            failure_kind="",
            tips=[],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Testing MongoDB connection...",
        progress_callback=do_work,
    )
