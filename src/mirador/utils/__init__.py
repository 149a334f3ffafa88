"""Utility modules for Mirador.

Provides:
- text: slugify for heading anchors
- hashing: hash_str and hash_parts for cache keys and block identifiers
- logger: get_logger for logging
"""

from mirador.utils.hashing import hash_parts, hash_str
from mirador.utils.logger import get_logger
from mirador.utils.text import slugify

__all__ = [
    "get_logger",
    "hash_parts",
    "hash_str",
    "slugify",
]
