"""SHA-256 helpers for parse-cache keys and block identifiers.

Digests depend only on the input text, never on the process, so ids and
cache keys stay stable across runs.

Example:
    >>> from mirador.utils.hashing import hash_parts, hash_str
    >>> hash_str("hello", truncate=12)
    '2cf24dba5fb0'
    >>> hash_parts("True", "False") == hash_str("True|False")
    True
"""

import hashlib


def hash_str(content: str, truncate: int | None = None) -> str:
    """Hex SHA-256 digest of content, optionally cut to ``truncate`` chars.

    Examples:
        >>> hash_str("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    digest = hashlib.sha256(content.encode("utf-8")).hexdigest()
    return digest if truncate is None else digest[:truncate]


def hash_parts(*parts: str, truncate: int | None = None) -> str:
    """Hash several fields as one ``|``-joined string."""
    return hash_str("|".join(parts), truncate=truncate)
