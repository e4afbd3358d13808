"""Shared pytest configuration and fixtures for all tests."""

import io
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import MagicMock

import mongomock
import pytest
from pymongo.uri_parser import parse_uri

from jtops.api.database.ProbeConfig import ENV_VAR


def pytest_configure(config):
    for marker in ("unit", "database", "secrets", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def run_cli(entry_point, args):
    """Execute a CLI entry point and capture exit code, stdout and stderr."""
    out_buf = io.StringIO()
    err_buf = io.StringIO()
    with redirect_stdout(out_buf), redirect_stderr(err_buf):
        try:
            rc = entry_point(args)
        except SystemExit as exc:  # commands exit through sys.exit
            rc = exc.code if isinstance(exc.code, int) else 0
    return rc, out_buf.getvalue(), err_buf.getvalue()


# =============================================================================
# MongoDB Test Helpers
# =============================================================================


class FakeMongoClient:
    """Stand-in for pymongo.MongoClient backed by a shared mongomock client.

    Records the URI it was built with and whether close() was called.
    """

    def __init__(self, uri: str, backing: mongomock.MongoClient, address=("localhost", 27017)):
        self.uri = uri
        self._backing = backing
        self.address = address
        self.nodes = frozenset({address}) if address else frozenset()
        self.admin = MagicMock()
        self.admin.command.return_value = {"ok": 1.0}
        self.closed = False

    def get_default_database(self, default=None):
        name = parse_uri(self.uri)["database"] or default
        return self._backing[name]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def mongo_backing() -> mongomock.MongoClient:
    """Fresh in-memory MongoDB for one test."""
    return mongomock.MongoClient()


@pytest.fixture
def fake_clients(monkeypatch, mongo_backing) -> list[FakeMongoClient]:
    """Replace MongoClient in the probe with FakeMongoClient.

    Returns the list of clients created, in creation order.
    """
    created: list[FakeMongoClient] = []

    def factory(uri: str) -> FakeMongoClient:
        client = FakeMongoClient(uri, mongo_backing)
        created.append(client)
        return client

    monkeypatch.setattr("jtops.api.database.Probe.MongoClient", factory)
    return created


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path) -> Path:
    """Unset MONGODB_URI and run from an empty directory.

    setenv before delenv so that undo also removes a value loaded from a .env file.
    """
    monkeypatch.setenv(ENV_VAR, "placeholder")
    monkeypatch.delenv(ENV_VAR)
    monkeypatch.chdir(tmp_path)
    return tmp_path
