"""
Active/passive failover client.

``Client`` probes the active cluster's hosts in order, then the passive
cluster's hosts in order, with an Info ``statistics`` command. The first host
returning a non-empty reply wins. Every call probes from scratch; nothing is
cached between calls and no sockets are held open.
"""

from __future__ import annotations

from typing import Any, Protocol, Self

from .config.client_config import ClientConfig
from .config.endpoint import DatabaseEndpoint
from .exceptions import ConnectionFailed
from .log import Logger, LogSink
from .protocol.info import STATISTICS_COMMAND, send_info
from .types import InfoResponse


class InfoTransport(Protocol):
    """Callable performing one Info exchange; ``send_info`` is the default."""

    def __call__(
        self,
        host: str,
        port: int,
        command: str,
        connect_timeout_ms: int | None = None,
        read_timeout_ms: int | None = None,
        logger: LogSink | None = None,
    ) -> bytes: ...


class Client:
    """
    Connection manager for an active/passive Aerospike deployment.

    Usage:
        config = ClientConfig.build_default()
        with Client(config) as client:
            client.connect()
            assert client.ping()

    The configuration is never modified. A single instance is not meant to
    be shared between threads without external locking.
    """

    def __init__(
        self,
        config: ClientConfig,
        logger: LogSink | None = None,
        transport: InfoTransport = send_info,
    ):
        """
        Args:
            config: Validated configuration, typically from ``ClientConfig.build_default()``
            logger: Diagnostic sink (defaults to ``Logger()``)
            transport: Info exchange function, replaceable for testing
        """
        self._config = config
        self._logger: LogSink = logger if logger is not None else Logger()
        self._transport = transport
        self._closed = False

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def logger(self) -> LogSink:
        return self._logger

    @property
    def is_closed(self) -> bool:
        return self._closed

    def connect(self) -> None:
        """
        Reach the deployment, failing over from active to passive.

        Raises:
            ConnectionFailed: If no host in either endpoint answered
        """
        self._ensure_open()
        self._logger.info("client", "Starting connection attempts (active then passive)")
        if self._failover() is None:
            raise ConnectionFailed("No active or passive host responded.")

    def ping(self) -> bool:
        """
        Check liveness with the same active-then-passive ordering.

        Returns:
            True when a host answered

        Raises:
            ConnectionFailed: If no host in either endpoint answered
        """
        self._ensure_open()
        if self._failover() is None:
            raise ConnectionFailed("Ping failed: no active or passive host responded.")
        return True

    def statistics(self) -> InfoResponse:
        """
        Fetch node statistics from the first responding host.

        Raises:
            ConnectionFailed: If no host in either endpoint answered
        """
        self._ensure_open()
        response = self._failover()
        if response is None:
            raise ConnectionFailed("No active or passive host returned statistics.")
        return response

    def close(self) -> None:
        """Release the client. Further calls raise ConnectionFailed."""
        self._closed = True

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ConnectionFailed("Client is closed.")

    def _failover(self) -> InfoResponse | None:
        response = self._try_endpoint(self._config.active)
        if response is not None:
            return response

        passive = self._config.passive
        if passive is None:
            return None

        self._logger.warn("client", "Active endpoint failed; attempting passive endpoint")
        return self._try_endpoint(passive)

    def _try_endpoint(self, endpoint: DatabaseEndpoint) -> InfoResponse | None:
        """Return the first non-empty reply from the endpoint's hosts, or None."""
        for host, port in endpoint.addresses():
            try:
                raw = self._transport(
                    host,
                    port,
                    STATISTICS_COMMAND,
                    connect_timeout_ms=endpoint.connect_timeout_ms,
                    read_timeout_ms=endpoint.read_timeout_ms,
                    logger=self._logger,
                )
            except ConnectionFailed:
                continue
            if raw:
                self._logger.info("client", f"Received statistics from {host}:{port}")
                return InfoResponse.from_bytes(raw)
        return None

    def __repr__(self) -> str:
        passive = "yes" if self._config.has_passive else "no"
        return f"Client(active={list(self._config.active.hosts)!r}, passive={passive}, closed={self._closed})"


__all__ = ["Client", "InfoTransport"]
