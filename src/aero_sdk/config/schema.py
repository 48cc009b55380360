"""
Optional namespace/set descriptor.

Carries the namespace, set, default TTL, bin allow-list and secondary index
names an application expects. Nothing here is interpreted by the client; it
is validated and handed through.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MissingRequiredConfig
from ..log import LogSink
from ._env import environment, parse_csv, parse_int

NAMESPACE_ENV_KEY = "AEROSPIKE_NAMESPACE"
SET_ENV_KEY = "AEROSPIKE_SET"
DEFAULT_TTL_ENV_KEY = "AEROSPIKE_DEFAULT_TTL_SECONDS"
ALLOWED_BINS_ENV_KEY = "AEROSPIKE_ALLOWED_BINS"
SECONDARY_INDEXES_ENV_KEY = "AEROSPIKE_SECONDARY_INDEXES"


@dataclass(frozen=True)
class Schema:
    """
    Immutable schema descriptor.

    Attributes:
        namespace: Target namespace (required).
        set_name: Optional set within the namespace.
        default_ttl_seconds: Optional default record TTL.
        allowed_bins: Optional allow-list of bin names.
        secondary_indexes: Optional secondary index names.
    """

    namespace: str
    set_name: str | None = None
    default_ttl_seconds: int | None = None
    allowed_bins: tuple[str, ...] | None = None
    secondary_indexes: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        for name in ("allowed_bins", "secondary_indexes"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))

    def allows_bin(self, name: str) -> bool:
        """True when no allow-list is configured or ``name`` is on it."""
        return self.allowed_bins is None or name in self.allowed_bins

    def validate(self, logger: LogSink | None = None) -> None:
        """
        Raises:
            MissingRequiredConfig: If the namespace or any allowed bin name is empty
        """
        if not self.namespace:
            if logger is not None:
                logger.err("schema", f"Namespace is required ({NAMESPACE_ENV_KEY})")
            raise MissingRequiredConfig("Schema namespace is required.")
        if self.allowed_bins is not None and any(not bin_name for bin_name in self.allowed_bins):
            if logger is not None:
                logger.err("schema", "Allowed bin names must be non-empty")
            raise MissingRequiredConfig("Allowed bin names must be non-empty.")

    @classmethod
    def from_environment(
        cls,
        logger: LogSink | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Schema:
        """
        Load the schema from ``AEROSPIKE_NAMESPACE`` and related variables.

        An unparseable TTL is treated as unset.

        Raises:
            MissingRequiredConfig: If the namespace variable is absent or the schema is invalid
        """
        env = environment(environ)

        namespace = env.get(NAMESPACE_ENV_KEY)
        if namespace is None:
            if logger is not None:
                logger.err("schema", f"{NAMESPACE_ENV_KEY} is not set")
            raise MissingRequiredConfig(f"{NAMESPACE_ENV_KEY} is not set.")

        bins_value = env.get(ALLOWED_BINS_ENV_KEY)
        indexes_value = env.get(SECONDARY_INDEXES_ENV_KEY)

        schema = cls(
            namespace=namespace,
            set_name=env.get(SET_ENV_KEY),
            default_ttl_seconds=parse_int(env.get(DEFAULT_TTL_ENV_KEY)),
            allowed_bins=parse_csv(bins_value) if bins_value is not None else None,
            secondary_indexes=parse_csv(indexes_value) if indexes_value is not None else None,
        )
        schema.validate(logger)
        return schema


__all__ = [
    "ALLOWED_BINS_ENV_KEY",
    "DEFAULT_TTL_ENV_KEY",
    "NAMESPACE_ENV_KEY",
    "SECONDARY_INDEXES_ENV_KEY",
    "SET_ENV_KEY",
    "Schema",
]
