"""
Type definitions for Aerospike SDK responses.

Provides a parsed view of Info replies instead of raw bytes.
"""

from dataclasses import dataclass, field


@dataclass
class InfoResponse:
    """
    Reply to an Info command.

    Nodes answer ``<command>\\t<key>=<value>;<key>=<value>...\\n``; the echoed
    command is optional.

    Attributes:
        command: Echoed command name, or "" when the node did not echo it.
        statistics: Parsed ``key=value`` pairs, in reply order.
        raw: The exact bytes received.
    """

    command: str = ""
    statistics: dict[str, str] = field(default_factory=dict)
    raw: bytes = b""

    @classmethod
    def from_bytes(cls, raw: bytes) -> "InfoResponse":
        """Parse an Info reply. Undecodable bytes are replaced, never rejected."""
        text = raw.decode("utf-8", errors="replace").rstrip("\r\n")

        command = ""
        if "\t" in text:
            command, text = text.split("\t", 1)

        statistics: dict[str, str] = {}
        for item in text.split(";"):
            if not item:
                continue
            key, _, value = item.partition("=")
            statistics[key.strip()] = value.strip()

        return cls(command=command, statistics=statistics, raw=raw)

    @property
    def is_empty(self) -> bool:
        return not self.raw

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.statistics.get(key, default)

    @property
    def cluster_size(self) -> int | None:
        """``cluster_size`` as an integer, when present and numeric."""
        value = self.statistics.get("cluster_size")
        if value is None or not value.isdigit():
            return None
        return int(value)


__all__ = ["InfoResponse"]
