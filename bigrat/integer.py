"""Based parsing and printing of arbitrary-precision integers."""
from __future__ import annotations

import numpy as np

from .config import Config
from .errors import ParseError

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_big_int(text: str, base: int) -> int:
    """Parse *text* as an integer in *base*.

    An explicit base takes ``[sign] digits`` only: no prefix, whitespace or
    underscores. Base ``0`` reads Python integer literals, prefixes included.
    """
    if base != 0:
        body = text[1:] if text.startswith(("+", "-")) else text
        valid = DIGITS[:base]
        if not body or any(c not in valid for c in body.lower()):
            raise ParseError("integer number syntax")
    try:
        return int(text, base)
    except ValueError as exc:
        raise ParseError("integer number syntax") from exc


def format_big_int(value: int, config: Config) -> str:
    """Render *value* in the configured output base using lower-case digits."""
    base = config.output_base
    if base in (0, 10):
        return str(value)
    return np.base_repr(value, base).lower()


__all__ = ["format_big_int", "parse_big_int"]
