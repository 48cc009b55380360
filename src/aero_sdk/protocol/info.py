"""
Info protocol transport.

A single blocking exchange with one node: send a newline-terminated text
command, read one reply of at most 32 KiB, close the socket. There is no
framing; the reply is whatever the peer sends within that read.
"""

import socket

from ..exceptions import ConnectionFailed
from ..log import LogSink

INFO_BUFFER_SIZE = 32 * 1024
STATISTICS_COMMAND = "statistics"


def _seconds(timeout_ms: int | None) -> float | None:
    # 0 would put the socket in non-blocking mode
    if not timeout_ms:
        return None
    return timeout_ms / 1000.0


def send_info(
    host: str,
    port: int,
    command: str,
    connect_timeout_ms: int | None = None,
    read_timeout_ms: int | None = None,
    logger: LogSink | None = None,
) -> bytes:
    """
    Send an Info command to ``host:port`` and return the raw reply.

    Args:
        host: Node host name or address
        port: Info port
        command: Command text, sent followed by a single newline
        connect_timeout_ms: Connect timeout; None or 0 blocks until the OS gives up
        read_timeout_ms: Timeout for the send and the single read; None or 0 blocks
        logger: Optional diagnostic sink

    Returns:
        The bytes received by one read call (may be empty)

    Raises:
        ConnectionFailed: If the address cannot be resolved, or connecting, sending
            or reading fails
    """
    try:
        sock = socket.create_connection((host, port), timeout=_seconds(connect_timeout_ms))
    except (OSError, UnicodeError, OverflowError) as e:
        if logger is not None:
            logger.err("net", f"TCP connection to {host}:{port} failed: {e}")
        raise ConnectionFailed(f"Cannot connect to {host}:{port}: {e}", host=host, port=port) from e

    with sock:
        if logger is not None:
            logger.info("net", f"Connected to {host}:{port} for Info command")
        sock.settimeout(_seconds(read_timeout_ms))
        try:
            sock.sendall(f"{command}\n".encode("utf-8"))
            return sock.recv(INFO_BUFFER_SIZE)
        except OSError as e:
            if logger is not None:
                logger.err("net", f"Failed Info exchange with {host}:{port}: {e}")
            raise ConnectionFailed(f"Info exchange with {host}:{port} failed: {e}", host=host, port=port) from e


__all__ = ["INFO_BUFFER_SIZE", "STATISTICS_COMMAND", "send_info"]
