"""String helpers."""

from __future__ import annotations

import string

__all__ = ["to_lower_ascii"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def to_lower_ascii(text: str) -> str:
    """Lower-case only the ASCII letters A-Z, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)