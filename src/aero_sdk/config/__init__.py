"""
Aerospike SDK Configuration Module.

Loads and validates the edition, endpoints, credentials and schema.
"""

from .client_config import ACTIVE_PREFIX, PASSIVE_PREFIX, ClientConfig
from .credentials import Credentials
from .endpoint import DatabaseEndpoint
from .schema import Schema
from ._env import parse_csv

__all__ = [
    "ACTIVE_PREFIX",
    "PASSIVE_PREFIX",
    "ClientConfig",
    "Credentials",
    "DatabaseEndpoint",
    "Schema",
    "parse_csv",
]
