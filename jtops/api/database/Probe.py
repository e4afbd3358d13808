"""Single-attempt MongoDB connectivity probe."""

import logging
from collections.abc import Callable
from typing import Any

from pymongo import MongoClient
from pymongo.errors import InvalidOperation
from pymongo.uri_parser import parse_uri

from .ConnectionReport import ConnectionReport
from .FailureKind import FailureKind
from .ProbeConfig import ProbeConfig
from .ProbeError import ProbeError
from .ProbeState import ProbeState
from .ReadyState import ReadyState

logger = logging.getLogger(__name__)

# Database name MongoDB uses when the URI has no path
DEFAULT_DATABASE_NAME = "test"


class Probe:
    """Connect once, report, and close.

    Use as a context manager. The client is closed on every exit path once it
    has been constructed, including when listing collections fails.

    Example:
        ```python
        with Probe(ProbeConfig.from_env()) as probe:
            report = probe.report()
        ```
    """

    def __init__(self, config: ProbeConfig, client_factory: Callable[[str], Any] | None = None):
        self.config = config
        # Driver defaults apply: no timeout override
        self._client_factory = client_factory or MongoClient
        self._client: Any | None = None
        self.state = ProbeState.IDLE
        self.closed = False

    def __enter__(self) -> "Probe":
        if self.state is not ProbeState.IDLE:
            raise RuntimeError(f"Probe cannot be reused (state: {self.state.value})")
        self.state = ProbeState.CONNECTING
        logger.debug(f"Connecting to MongoDB ({self.config.source} URI)")
        try:
            self._client = self._client_factory(self.config.uri)
            self._client.admin.command("ping")
        except Exception as e:
            self.state = ProbeState.FAILED
            self._close()
            logger.info(f"MongoDB connection failed ({self.config.source} URI): {e}")
            raise ProbeError(FailureKind.CONNECT, e) from e
        self.state = ProbeState.CONNECTED
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._close()
        if self.state is ProbeState.CONNECTED:
            self.state = ProbeState.CLOSED
        return False

    @property
    def ready_state(self) -> ReadyState:
        if self.state is ProbeState.CONNECTED:
            return ReadyState.CONNECTED
        if self.state is ProbeState.CONNECTING:
            return ReadyState.CONNECTING
        return ReadyState.DISCONNECTED

    def report(self) -> ConnectionReport:
        """Read host, database name and ready state, and list collections."""
        if self.state is not ProbeState.CONNECTED or self._client is None:
            raise RuntimeError("Probe not connected. Use as context manager first.")
        try:
            host = self._resolve_host()
            database = self._client.get_default_database(default=DEFAULT_DATABASE_NAME)
            collections = database.list_collection_names()
        except Exception as e:
            self.state = ProbeState.FAILED
            logger.info(f"Listing collections failed ({self.config.source} URI): {e}")
            raise ProbeError(FailureKind.LIST, e) from e
        logger.debug(f"Found {len(collections)} collection(s) in {database.name}")
        return ConnectionReport(
            host=host,
            database=database.name,
            ready_state=self.ready_state,
            collections=list(collections),
        )

    def _resolve_host(self) -> str:
        # address raises InvalidOperation when connected to several mongos routers
        try:
            address = self._client.address  # type: ignore[union-attr]
        except InvalidOperation:
            address = None
        if address:
            return address[0]
        nodes = sorted(self._client.nodes)  # type: ignore[union-attr]
        if nodes:
            return nodes[0][0]
        host, _port = self._parse_host_port(self.config.uri)
        return host

    def _close(self) -> None:
        if self._client is not None and not self.closed:
            self._client.close()
            self.closed = True
            logger.debug("MongoDB client closed")

    @staticmethod
    def _parse_host_port(uri: str) -> tuple[str, int]:
        parsed = parse_uri(uri)
        if not parsed.get("nodelist"):
            raise RuntimeError("MongoDB URI does not name a host")
        host, port = parsed["nodelist"][0]
        if port is None:
            port = 27017
        return host, port
