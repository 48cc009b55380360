"""
Authentication and TLS credential bundle.

Credentials are loaded either from environment variables or from a
``KEY=VALUE`` secrets file, under a caller-supplied prefix such as
``AEROSPIKE_ACTIVE_``. Both loaders validate before returning, so a
``Credentials`` instance obtained from them is always consistent.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ..exceptions import MissingRequiredCredential
from ..log import LogSink
from ._env import environment, parse_bool, prefixed, read_secrets

USER = "USER"
PASSWORD = "PASSWORD"
TLS_ENABLE = "TLS_ENABLE"
TLS_CA_FILE = "TLS_CA_FILE"
TLS_CERT_FILE = "TLS_CERT_FILE"
TLS_KEY_FILE = "TLS_KEY_FILE"

# Checked in this order when matching secrets-file keys by suffix.
_FIELDS_BY_SUFFIX: tuple[tuple[str, str], ...] = (
    (USER, "user"),
    (PASSWORD, "password"),
    (TLS_ENABLE, "tls_enabled"),
    (TLS_CA_FILE, "tls_ca_file"),
    (TLS_CERT_FILE, "tls_cert_file"),
    (TLS_KEY_FILE, "tls_key_file"),
)


@dataclass(frozen=True, repr=False)
class Credentials:
    """
    Immutable credential bundle for one cluster.

    Attributes:
        user: Username, or None when authentication is not used.
        password: Password, or None when authentication is not used.
        tls_enabled: Whether TLS is requested. Only presence of the files is checked.
        tls_ca_file: Path to the CA bundle.
        tls_cert_file: Path to the client certificate.
        tls_key_file: Path to the client private key.
    """

    user: str | None = None
    password: str | None = None
    tls_enabled: bool = False
    tls_ca_file: str | None = None
    tls_cert_file: str | None = None
    tls_key_file: str | None = None

    @property
    def has_auth(self) -> bool:
        return self.user is not None and self.password is not None

    def validate(self, logger: LogSink | None = None) -> None:
        """
        Check the bundle for consistency.

        Args:
            logger: Optional sink receiving a diagnostic before the error is raised

        Raises:
            MissingRequiredCredential: If TLS is enabled without CA, cert and key paths,
                or if only one of user/password is set
        """
        if self.tls_enabled and (self.tls_ca_file is None or self.tls_cert_file is None or self.tls_key_file is None):
            if logger is not None:
                logger.err("credentials", "TLS enabled but CA/cert/key are missing")
            raise MissingRequiredCredential("TLS is enabled but CA, cert and key files must all be provided.")

        # Auth is optional; when used, both halves are required.
        if (self.user is None) != (self.password is None):
            if logger is not None:
                logger.err("credentials", "Provide both user and password or neither")
            raise MissingRequiredCredential("Provide both user and password, or neither.")

    @classmethod
    def from_environment(
        cls,
        prefix: str,
        logger: LogSink | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Credentials:
        """
        Load credentials from ``<prefix>USER``, ``<prefix>PASSWORD``, ``<prefix>TLS_*``.

        Raises:
            MissingRequiredCredential: If the loaded bundle is inconsistent
        """
        env = environment(environ)
        creds = cls(
            user=env.get(prefixed(prefix, USER)),
            password=env.get(prefixed(prefix, PASSWORD)),
            tls_enabled=parse_bool(env.get(prefixed(prefix, TLS_ENABLE))),
            tls_ca_file=env.get(prefixed(prefix, TLS_CA_FILE)),
            tls_cert_file=env.get(prefixed(prefix, TLS_CERT_FILE)),
            tls_key_file=env.get(prefixed(prefix, TLS_KEY_FILE)),
        )
        creds.validate(logger)
        return creds

    @classmethod
    def from_secrets_file(
        cls,
        path: str | os.PathLike[str],
        prefix: str,
        logger: LogSink | None = None,
    ) -> Credentials:
        """
        Load credentials from a ``KEY=VALUE`` secrets file.

        Only keys starting with ``prefix`` are considered; each is assigned to
        the first field whose name it ends with. When a field appears more
        than once, the last line wins.

        Raises:
            SecretsFileError: If the file cannot be read
            MissingRequiredCredential: If the loaded bundle is inconsistent
        """
        values: dict[str, str | bool] = {}
        for key, value in read_secrets(path):
            if not key.startswith(prefix):
                continue
            for suffix, field_name in _FIELDS_BY_SUFFIX:
                if key.endswith(suffix):
                    values[field_name] = parse_bool(value) if field_name == "tls_enabled" else value
                    break

        creds = cls(**values)  # type: ignore[arg-type]
        creds.validate(logger)
        return creds

    def __repr__(self) -> str:
        password = "***" if self.password is not None else None
        return (
            f"Credentials(user={self.user!r}, password={password!r}, tls_enabled={self.tls_enabled!r}, "
            f"tls_ca_file={self.tls_ca_file!r}, tls_cert_file={self.tls_cert_file!r}, "
            f"tls_key_file={self.tls_key_file!r})"
        )


__all__ = ["Credentials"]
