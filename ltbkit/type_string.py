"""Readable names for the types of values."""

from __future__ import annotations

import builtins
from typing import Any

__all__ = ["type_string", "replace_ugly_strings"]

_UGLY_STRING_1 = (
    "std::__cxx11::basic_string<char, std::char_traits<char>, std::allocator<char> > >"
)
_UGLY_STRING_2 = (
    "std::__cxx11::basic_string<char, std::char_traits<char>, std::allocator<char> >"
)


def replace_ugly_strings(type_str: str) -> str:
    """Shorten spelled-out standard string type names to ``std::string``."""
    type_str = type_str.replace(_UGLY_STRING_1, "std::string>")
    return type_str.replace(_UGLY_STRING_2, "std::string")


def type_string(value: Any) -> str:
    """Return the qualified name of ``value``'s type, or of ``value`` if it is a type.

    Built-in types are named without their module.
    """
    kind = value if isinstance(value, type) else type(value)
    module = kind.__module__
    if module == builtins.__name__:
        name = kind.__qualname__
    else:
        name = f"{module}.{kind.__qualname__}"
    return replace_ugly_strings(name)