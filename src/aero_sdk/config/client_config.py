"""
Client configuration assembly.

``ClientConfig.build_default()`` gathers the edition, the mandatory active
endpoint and credentials, the optional passive pair and the optional schema
from the environment into one immutable object.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..edition import EDITION_ENV_KEY, Edition, resolve_edition
from ..exceptions import ConfigError, MissingRequiredConfig
from ..log import Logger, LogSink
from ._env import environment, prefixed
from .credentials import Credentials
from .endpoint import DatabaseEndpoint
from .schema import NAMESPACE_ENV_KEY, Schema

ACTIVE_PREFIX = "AEROSPIKE_ACTIVE_"
PASSIVE_PREFIX = "AEROSPIKE_PASSIVE_"


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable client configuration.

    Attributes:
        active: Primary cluster endpoint.
        active_credentials: Credentials for the primary cluster.
        edition: Deployment edition.
        passive: Disaster-recovery endpoint, tried after every active host failed.
        passive_credentials: Credentials for the passive cluster.
        schema: Optional namespace/set descriptor.
    """

    active: DatabaseEndpoint
    active_credentials: Credentials
    edition: Edition = Edition.COMMUNITY
    passive: DatabaseEndpoint | None = None
    passive_credentials: Credentials | None = None
    schema: Schema | None = None

    def __post_init__(self) -> None:
        if (self.passive is None) != (self.passive_credentials is None):
            raise MissingRequiredConfig("Passive endpoint and passive credentials must be configured together.")

    @property
    def has_passive(self) -> bool:
        return self.passive is not None

    @classmethod
    def build_default(
        cls,
        logger: LogSink | None = None,
        environ: Mapping[str, str] | None = None,
        secrets_path: str | os.PathLike[str] | None = None,
    ) -> ClientConfig:
        """
        Build the configuration from ``AEROSPIKE_*`` environment variables.

        The passive pair is built only when ``AEROSPIKE_PASSIVE_HOSTS`` is set,
        and the schema only when ``AEROSPIKE_NAMESPACE`` is set. Schema errors
        are logged and leave ``schema`` unset; every other error propagates.

        Args:
            logger: Sink for validation diagnostics (defaults to ``Logger()``)
            environ: Mapping to read from (defaults to ``os.environ``)
            secrets_path: Read both credential sets from this secrets file
                instead of the environment

        Returns:
            The validated configuration

        Raises:
            InvalidEdition: If ``AEROSPIKE_EDITION`` is unrecognized
            MissingRequiredConfig: If an endpoint is invalid
            MissingRequiredCredential: If a credential set is invalid
        """
        sink = logger if logger is not None else Logger()
        env = environment(environ)

        def load_credentials(prefix: str) -> Credentials:
            if secrets_path is not None:
                return Credentials.from_secrets_file(secrets_path, prefix, sink)
            return Credentials.from_environment(prefix, sink, env)

        edition = resolve_edition(EDITION_ENV_KEY, env)
        active = DatabaseEndpoint.from_environment(ACTIVE_PREFIX, sink, env)
        active_credentials = load_credentials(ACTIVE_PREFIX)

        passive: DatabaseEndpoint | None = None
        passive_credentials: Credentials | None = None
        if prefixed(PASSIVE_PREFIX, "HOSTS") in env:
            passive = DatabaseEndpoint.from_environment(PASSIVE_PREFIX, sink, env)
            passive_credentials = load_credentials(PASSIVE_PREFIX)

        schema: Schema | None = None
        if NAMESPACE_ENV_KEY in env:
            try:
                schema = Schema.from_environment(sink, env)
            except ConfigError as e:
                sink.warn("config", f"Ignoring invalid schema configuration: {e}")

        return cls(
            active=active,
            active_credentials=active_credentials,
            edition=edition,
            passive=passive,
            passive_credentials=passive_credentials,
            schema=schema,
        )


__all__ = ["ACTIVE_PREFIX", "PASSIVE_PREFIX", "ClientConfig"]
