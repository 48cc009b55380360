"""
Aerospike SDK Protocol Module.

Provides the text Info exchange used for liveness probes.
"""

from .info import INFO_BUFFER_SIZE, STATISTICS_COMMAND, send_info

__all__ = ["INFO_BUFFER_SIZE", "STATISTICS_COMMAND", "send_info"]
