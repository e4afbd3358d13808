"""Lifecycle of a single connectivity probe."""

from enum import Enum


class ProbeState(Enum):
    """IDLE -> CONNECTING -> {CONNECTED -> CLOSED} | FAILED.

    CLOSED and FAILED are terminal.
    """

    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    CLOSED = "closed"
    FAILED = "failed"

    @property
    def terminal(self) -> bool:
        return self in (ProbeState.CLOSED, ProbeState.FAILED)
