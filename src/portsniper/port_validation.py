"""Validation for the ``--port`` argument."""

from __future__ import annotations

from typing import Union

from .errors import InvalidPortError

MIN_PORT = 1
MAX_PORT = 65535


def is_valid_port(port: object) -> bool:
    # bool is an int subclass; True is not a port
    return isinstance(port, int) and not isinstance(port, bool) and MIN_PORT <= port <= MAX_PORT


def validate_port(raw: Union[str, int]) -> int:
    """Return ``raw`` as a TCP port number or raise :class:`InvalidPortError`.

    Strings must consist of ASCII digits only (surrounding whitespace is
    ignored), so signs, decimals and trailing garbage are all rejected.
    """
    if isinstance(raw, str):
        text = raw.strip()
        if not text or not (text.isascii() and text.isdigit()):
            raise InvalidPortError(raw)
        port = int(text)
    elif is_valid_port(raw):
        port = raw
    else:
        raise InvalidPortError(raw)

    if not is_valid_port(port):
        raise InvalidPortError(raw)
    return port


__all__ = ["MAX_PORT", "MIN_PORT", "is_valid_port", "validate_port"]
