"""
Deployment edition resolution.

The edition is read once from the environment while building configuration
and carried through unchanged; both editions behave identically here.
"""

import os
from collections.abc import Mapping
from enum import Enum

from .exceptions import InvalidEdition

EDITION_ENV_KEY = "AEROSPIKE_EDITION"


class Edition(str, Enum):
    """Aerospike deployment tier."""

    COMMUNITY = "community"
    ENTERPRISE = "enterprise"

    @classmethod
    def parse(cls, value: str) -> "Edition":
        """Match a token case-insensitively, raising InvalidEdition otherwise."""
        lowered = value.lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise InvalidEdition(
            f"Invalid edition '{value}'. Must be 'community' or 'enterprise'.",
            value=value,
        )


def resolve_edition(env_key: str = EDITION_ENV_KEY, environ: Mapping[str, str] | None = None) -> Edition:
    """
    Resolve the edition from an environment variable.

    Args:
        env_key: Variable to read
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        ``Edition.COMMUNITY`` when the variable is unset, otherwise the parsed edition

    Raises:
        InvalidEdition: If the variable holds anything other than the two tokens
    """
    env = os.environ if environ is None else environ
    value = env.get(env_key)
    if value is None:
        return Edition.COMMUNITY
    return Edition.parse(value)


def edition_parity_statement() -> str:
    return "Community and Enterprise editions are equal in this library by design."


__all__ = ["EDITION_ENV_KEY", "Edition", "edition_parity_statement", "resolve_edition"]
