"""Naming utilities for code generation."""

from __future__ import annotations

import re
import string
from functools import lru_cache

_LETTERS: frozenset[str] = frozenset(string.ascii_letters)
_DIGITS: frozenset[str] = frozenset(string.digits)

DEFAULT_PACKAGE_NAME = "models"


@lru_cache(maxsize=1024)
def to_capital_case(value: str) -> str:
    """Convert a table or column name to a capitalized Go identifier.

    Letters starting a segment are upper-cased and the rest lower-cased.
    Digits are kept and start a new segment. Anything else is dropped and
    starts a new segment.

    Examples:
        >>> to_capital_case("cp___hello_12jiu")
        'CpHello12Jiu'
        >>> to_capital_case("123abc")
        '123Abc'
        >>> to_capital_case("___")
        ''
    """
    chars: list[str] = []
    segment_start = True
    for ch in value:
        if ch in _LETTERS:
            chars.append(ch.upper() if segment_start else ch.lower())
            segment_start = False
        elif ch in _DIGITS:
            chars.append(ch)
            segment_start = True
        else:
            segment_start = True
    return "".join(chars)


@lru_cache(maxsize=256)
def sanitize_package_name(value: str) -> str:
    """Sanitize a directory name for use as a Go package name."""
    sanitized = re.sub(r"[^0-9a-z_]", "", value.lower().replace("-", "_"))
    if not sanitized or sanitized[0] in _DIGITS:
        return DEFAULT_PACKAGE_NAME
    return sanitized
