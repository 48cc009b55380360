"""
Aerospike SDK - a minimal active/passive connectivity layer for Aerospike.

Supports:
- Configuration from AEROSPIKE_* environment variables or a secrets file
- Validation of endpoints, credentials (incl. TLS file presence) and schema
- Ordered failover: active hosts first, then passive hosts
- Liveness probes over the text Info protocol (``statistics``)

Usage:
    from aero_sdk import Client, ClientConfig

    config = ClientConfig.build_default()
    with Client(config) as client:
        client.connect()
"""

from .client import Client, InfoTransport
from .config import ClientConfig, Credentials, DatabaseEndpoint, Schema
from .edition import Edition, edition_parity_statement, resolve_edition
from .exceptions import (
    AeroError,
    ConfigError,
    ConnectionFailed,
    InvalidEdition,
    MissingRequiredConfig,
    MissingRequiredCredential,
    SecretsFileError,
)
from .log import Logger, LogLevel, LogSink
from .protocol import send_info
from .types import InfoResponse

__version__ = "1.0.0"


def version() -> str:
    """Library identifier, e.g. ``aero-sdk/1.0.0``."""
    return f"aero-sdk/{__version__}"


__all__ = [
    # Client
    "Client",
    "InfoTransport",
    # Configuration
    "ClientConfig",
    "Credentials",
    "DatabaseEndpoint",
    "Schema",
    "Edition",
    "edition_parity_statement",
    "resolve_edition",
    # Logging
    "Logger",
    "LogLevel",
    "LogSink",
    # Protocol
    "send_info",
    "InfoResponse",
    # Exceptions
    "AeroError",
    "ConfigError",
    "ConnectionFailed",
    "InvalidEdition",
    "MissingRequiredConfig",
    "MissingRequiredCredential",
    "SecretsFileError",
    "version",
]
