"""Probe failure carrying the failed step and the driver exception."""

from .FailureKind import FailureKind


class ProbeError(Exception):
    def __init__(self, kind: FailureKind, cause: BaseException):
        super().__init__(str(cause))
        self.kind = kind
        self.cause = cause

    def __repr__(self) -> str:
        return f"ProbeError(kind={self.kind.value!r}, cause={self.cause!r})"
