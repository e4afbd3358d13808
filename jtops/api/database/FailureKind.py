"""Which probe step failed."""

from enum import Enum


class FailureKind(str, Enum):
    CONNECT = "connect"
    LIST = "list"
