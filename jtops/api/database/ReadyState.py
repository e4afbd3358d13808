"""Driver-style connection readiness."""

from enum import IntEnum


class ReadyState(IntEnum):
    DISCONNECTED = 0
    CONNECTED = 1
    CONNECTING = 2
    DISCONNECTING = 3

    @property
    def label(self) -> str:
        return "Connected" if self is ReadyState.CONNECTED else "Disconnected"
