"""
Aerospike SDK Exceptions.

Custom exception hierarchy for configuration and connectivity errors.
"""


class AeroError(Exception):
    """Base exception for all Aerospike SDK errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class ConfigError(AeroError):
    """Raised when configuration cannot be assembled or validated."""

    pass


class MissingRequiredConfig(ConfigError):
    """Raised when structural configuration is incomplete (hosts, port, namespace, bins)."""

    pass


class MissingRequiredCredential(ConfigError):
    """Raised when TLS is enabled without a full bundle, or user/password are half set."""

    pass


class SecretsFileError(MissingRequiredCredential):
    """Raised when a secrets file cannot be opened or read."""

    def __init__(self, message: str, path: str | None = None, code: int | None = None):
        self.path = path
        super().__init__(message, code)


class InvalidEdition(ConfigError):
    """Raised when the edition flag holds an unrecognized token."""

    def __init__(self, message: str, value: str | None = None, code: int | None = None):
        self.value = value
        super().__init__(message, code)


class ConnectionFailed(AeroError):
    """Raised when no host answered, or a transport exchange failed."""

    def __init__(
        self,
        message: str,
        host: str | None = None,
        port: int | None = None,
        code: int | None = None,
    ):
        self.host = host
        self.port = port
        super().__init__(message, code)
