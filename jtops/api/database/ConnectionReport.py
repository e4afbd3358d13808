"""Snapshot of a successful connection."""

from dataclasses import dataclass, field

from .ReadyState import ReadyState


@dataclass(frozen=True)
class ConnectionReport:
    host: str
    database: str
    ready_state: ReadyState
    collections: list[str] = field(default_factory=list)

    @property
    def collection_count(self) -> int:
        return len(self.collections)
