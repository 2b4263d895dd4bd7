"""Utility modules for rulex.

Provides:
- hashing: hash_str for compiled-pattern fingerprints
- logger: get_logger for logging
"""

from rulex.utils.hashing import hash_str
from rulex.utils.logger import get_logger

__all__ = [
    "get_logger",
    "hash_str",
]
