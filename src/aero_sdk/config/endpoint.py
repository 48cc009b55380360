"""
Cluster endpoint descriptor.

An endpoint is the ordered list of seed hosts for one cluster plus the port,
timeouts and optional cluster name, loaded from ``<prefix>HOSTS``,
``<prefix>PORT``, ``<prefix>CONNECT_TIMEOUT_MS``, ``<prefix>READ_TIMEOUT_MS``
and ``<prefix>CLUSTER_NAME``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from ..exceptions import MissingRequiredConfig
from ..log import LogSink
from ._env import MAX_PORT, environment, parse_csv, parse_int, prefixed

DEFAULT_PORT = 3000
DEFAULT_CONNECT_TIMEOUT_MS = 5000
DEFAULT_READ_TIMEOUT_MS = 5000


@dataclass(frozen=True)
class DatabaseEndpoint:
    """
    Immutable descriptor of one reachable cluster.

    Attributes:
        hosts: Seed hosts, tried in this order. Duplicates are kept.
        port: Info port shared by every host.
        connect_timeout_ms: Connect timeout in milliseconds.
        read_timeout_ms: Read timeout in milliseconds.
        cluster_name: Optional expected cluster name.
    """

    hosts: tuple[str, ...] = ()
    port: int = DEFAULT_PORT
    connect_timeout_ms: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout_ms: int = DEFAULT_READ_TIMEOUT_MS
    cluster_name: str | None = None

    def __post_init__(self) -> None:
        # Accept any sequence of hosts but store a tuple to stay immutable.
        if not isinstance(self.hosts, tuple):
            object.__setattr__(self, "hosts", tuple(self.hosts))

    def addresses(self) -> Iterator[tuple[str, int]]:
        """Yield ``(host, port)`` pairs in listed order."""
        for host in self.hosts:
            yield host, self.port

    def validate(self, logger: LogSink | None = None) -> None:
        """
        Raises:
            MissingRequiredConfig: If no hosts are listed or the port is 0
        """
        if not self.hosts:
            if logger is not None:
                logger.err("config", "No hosts provided. Set AEROSPIKE_ACTIVE_HOSTS or passive equivalent.")
            raise MissingRequiredConfig("Endpoint has no hosts.")
        if self.port == 0:
            if logger is not None:
                logger.err("config", "Port cannot be 0. Set AEROSPIKE_ACTIVE_PORT or passive equivalent.")
            raise MissingRequiredConfig("Endpoint port cannot be 0.")

    @classmethod
    def from_environment(
        cls,
        prefix: str,
        logger: LogSink | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> DatabaseEndpoint:
        """
        Load an endpoint from prefixed environment variables.

        Unparseable port or timeout values fall back to their defaults rather
        than failing; only an empty host list or a zero port is an error.

        Raises:
            MissingRequiredConfig: If the loaded endpoint is invalid
        """
        env = environment(environ)

        hosts_value = env.get(prefixed(prefix, "HOSTS"))
        hosts = parse_csv(hosts_value) if hosts_value is not None else ()

        port = parse_int(env.get(prefixed(prefix, "PORT")), maximum=MAX_PORT)
        connect_timeout = parse_int(env.get(prefixed(prefix, "CONNECT_TIMEOUT_MS")))
        read_timeout = parse_int(env.get(prefixed(prefix, "READ_TIMEOUT_MS")))

        endpoint = cls(
            hosts=hosts,
            port=DEFAULT_PORT if port is None else port,
            connect_timeout_ms=DEFAULT_CONNECT_TIMEOUT_MS if connect_timeout is None else connect_timeout,
            read_timeout_ms=DEFAULT_READ_TIMEOUT_MS if read_timeout is None else read_timeout,
            cluster_name=env.get(prefixed(prefix, "CLUSTER_NAME")),
        )
        endpoint.validate(logger)
        return endpoint


__all__ = [
    "DEFAULT_CONNECT_TIMEOUT_MS",
    "DEFAULT_PORT",
    "DEFAULT_READ_TIMEOUT_MS",
    "DatabaseEndpoint",
]
