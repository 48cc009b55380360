"""Environment and secrets-file parsing shared by the configuration loaders."""

import os
import re
from collections.abc import Mapping

from dotenv.parser import parse_stream

from ..exceptions import SecretsFileError

_CSV_SEPARATORS = re.compile(r"[, ]")
_TRIM_CHARS = " \t\r"

MAX_PORT = 65535
MAX_U32 = 2**32 - 1


def environment(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def prefixed(prefix: str, name: str) -> str:
    """Derive a variable name, e.g. ``prefixed("AEROSPIKE_ACTIVE_", "PORT")``."""
    return f"{prefix}{name}"


def parse_csv(value: str) -> tuple[str, ...]:
    """
    Split a comma/space separated list.

    Tokens are trimmed and empty tokens dropped; order and duplicates are kept.
    ``" h1, h2 ,,h3 "`` becomes ``("h1", "h2", "h3")``.
    """
    tokens = (token.strip(_TRIM_CHARS) for token in _CSV_SEPARATORS.split(value))
    return tuple(token for token in tokens if token)


def parse_bool(value: str | None) -> bool:
    """Only ``"1"`` and case-insensitive ``"true"`` are truthy."""
    if value is None:
        return False
    return value == "1" or value.lower() == "true"


def parse_int(value: str | None, maximum: int = MAX_U32) -> int | None:
    """Parse a non-negative decimal integer no larger than ``maximum``; ``None`` on failure."""
    if value is None:
        return None
    try:
        parsed = int(value, 10)
    except ValueError:
        return None
    # int() also accepts surrounding whitespace, underscores and signs
    if not value.isdigit() or parsed > maximum:
        return None
    return parsed


def read_secrets(path: str | os.PathLike[str]) -> list[tuple[str, str]]:
    """
    Read ``KEY=VALUE`` pairs from a secrets file, in file order.

    The file uses ``.env`` syntax and is parsed with python-dotenv, without
    variable interpolation. Blank lines, ``#`` comments, unparseable lines and
    keys without ``=`` are skipped.

    Raises:
        SecretsFileError: If the file cannot be opened or decoded
    """
    pairs: list[tuple[str, str]] = []
    try:
        with open(path, encoding="utf-8") as stream:
            for binding in parse_stream(stream):
                if binding.key is None or binding.value is None:
                    continue
                pairs.append((binding.key, binding.value))
    except (OSError, UnicodeDecodeError) as e:
        raise SecretsFileError(f"Cannot read secrets file '{path}': {e}", path=str(path)) from e
    return pairs
