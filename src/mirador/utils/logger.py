"""Logger lookup for Mirador modules.

Every logger lives under the ``mirador`` namespace, so a host silences or
enables the whole package with one ``logging.getLogger("mirador")`` call.
Mirador only logs at debug level and never installs handlers.

Example:
    >>> from mirador.utils.logger import get_logger
    >>> get_logger("outline").name
    'mirador.outline'
"""

from __future__ import annotations

import logging

_ROOT = "mirador"


def get_logger(name: str) -> logging.Logger:
    """Return the standard library logger for name under ``mirador.``.

    Names already inside the namespace (``__name__`` of a Mirador module)
    are used as they are.
    """
    if name != _ROOT and not name.startswith(f"{_ROOT}."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
