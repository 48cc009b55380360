"""
Pytest configuration for aero-sdk tests.

Provides:
- isolation from AEROSPIKE_* variables of the developer's shell
- a recording log sink
- a threaded local Info server speaking the newline-command protocol
- an optional real Aerospike node for integration tests

Integration tests reach the real node through the ``aerospike_address``
fixture, configured by AEROSPIKE_TEST_HOST and AEROSPIKE_TEST_PORT.
"""

import os
import socket
import socketserver
import threading
from collections.abc import Callable, Generator
from dataclasses import dataclass, field

import pytest

# ---------------------------------------------------------------------------
# Integration node (override with AEROSPIKE_TEST_HOST / AEROSPIKE_TEST_PORT)
# ---------------------------------------------------------------------------
AEROSPIKE_TEST_HOST = os.getenv("AEROSPIKE_TEST_HOST", "localhost")
AEROSPIKE_TEST_PORT = int(os.getenv("AEROSPIKE_TEST_PORT", "3000"))

STATISTICS_REPLY = b"statistics\tcluster_size=2;uptime=42;objects=7\n"


def is_port_responding(host: str = AEROSPIKE_TEST_HOST, port: int = AEROSPIKE_TEST_PORT) -> bool:
    """Check if the Aerospike port is responding (basic TCP check)."""
    try:
        with socket.create_connection((host, port), timeout=2):
            return True
    except OSError:
        return False


def unused_port() -> int:
    """Return a local port nothing is listening on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "integration: requires a running Aerospike node")


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide AEROSPIKE_* variables so tests start from an empty configuration."""
    for key in list(os.environ):
        if key.startswith("AEROSPIKE_") and not key.startswith("AEROSPIKE_TEST_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Log sink
# ---------------------------------------------------------------------------


@dataclass
class RecordingSink:
    """LogSink that keeps every call as ``(level, component, message)``."""

    records: list[tuple[str, str, str]] = field(default_factory=list)

    def info(self, component: str, message: str) -> None:
        self.records.append(("info", component, message))

    def warn(self, component: str, message: str) -> None:
        self.records.append(("warn", component, message))

    def err(self, component: str, message: str) -> None:
        self.records.append(("err", component, message))

    def levels(self, level: str) -> list[str]:
        return [message for lvl, _, message in self.records if lvl == level]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


# ---------------------------------------------------------------------------
# Local Info server
# ---------------------------------------------------------------------------


class _InfoHandler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        server: "InfoServer" = self.server  # type: ignore[assignment]
        line = self.rfile.readline()
        server.commands.append(line)
        if server.reply:
            self.wfile.write(server.reply)


class InfoServer(socketserver.ThreadingTCPServer):
    """Answers each connection with ``reply`` after reading one command line."""

    daemon_threads = True
    allow_reuse_address = True

    def __init__(self, reply: bytes = STATISTICS_REPLY):
        super().__init__(("127.0.0.1", 0), _InfoHandler)
        self.reply = reply
        self.commands: list[bytes] = []

    @property
    def host(self) -> str:
        return self.server_address[0]

    @property
    def port(self) -> int:
        return self.server_address[1]


@pytest.fixture
def make_info_server() -> Generator[Callable[..., InfoServer], None, None]:
    """Factory starting Info servers; every server is stopped at teardown."""
    started: list[tuple[InfoServer, threading.Thread]] = []

    def _start(reply: bytes = STATISTICS_REPLY) -> InfoServer:
        server = InfoServer(reply)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        started.append((server, thread))
        return server

    yield _start

    for server, thread in started:
        server.shutdown()
        server.server_close()
        thread.join(timeout=2)


@pytest.fixture
def info_server(make_info_server: Callable[..., InfoServer]) -> InfoServer:
    return make_info_server()


@pytest.fixture
def closed_port() -> int:
    return unused_port()


@pytest.fixture(scope="session")
def aerospike_address() -> tuple[str, int]:
    return AEROSPIKE_TEST_HOST, AEROSPIKE_TEST_PORT


@pytest.fixture(scope="session")
def aerospike_available() -> bool:
    """
    Indicates if a real Aerospike node is reachable.

        def test_something(aerospike_available):
            if not aerospike_available:
                pytest.skip("Aerospike not available")
    """
    return is_port_responding()
