"""Bit flag sets built over ordinary enums whose values count up from zero."""

from __future__ import annotations

import enum
from typing import Any, Generic, Iterator, TypeVar

__all__ = [
    "Flags",
    "to_bits",
    "make_flags",
    "add_flag",
    "remove_flag",
    "toggle_flag",
    "has_flag",
    "no_flags",
    "all_flags",
    "to_list",
]

E = TypeVar("E", bound=enum.Enum)


def to_bits(value: enum.Enum) -> int:
    """Map an incremental enum member to its bit: 0 -> 0b1, 1 -> 0b10, 2 -> 0b100."""
    if not isinstance(value, enum.Enum):
        raise TypeError(f"expected an enum member, not {type(value).__name__}")
    raw = value.value
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise TypeError(f"{value!r} does not have an integer value")
    return 1 << raw


class Flags(Generic[E]):
    """A set of members of one enum, stored as bits."""

    __slots__ = ("enum_type", "bits")

    def __init__(self, enum_type: type[E], bits: int = 0) -> None:
        if not (isinstance(enum_type, type) and issubclass(enum_type, enum.Enum)):
            raise TypeError(f"{enum_type!r} is not an enum type")
        self.enum_type = enum_type
        self.bits = bits

    @staticmethod
    def of(flag: E) -> Flags[E]:
        """Return flags holding just ``flag``."""
        return Flags(type(flag), to_bits(flag))

    def _coerce(self, other: Any) -> Flags[E] | None:
        if isinstance(other, Flags):
            return other if other.enum_type is self.enum_type else None
        if isinstance(other, self.enum_type):
            return Flags.of(other)
        return None

    def __bool__(self) -> bool:
        return self.bits != 0

    def __invert__(self) -> Flags[E]:
        return Flags(self.enum_type, ~self.bits)

    def __or__(self, other: Any) -> Flags[E]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Flags(self.enum_type, self.bits | rhs.bits)

    __ror__ = __or__

    def __and__(self, other: Any) -> Flags[E]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Flags(self.enum_type, self.bits & rhs.bits)

    __rand__ = __and__

    def __xor__(self, other: Any) -> Flags[E]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Flags(self.enum_type, self.bits ^ rhs.bits)

    __rxor__ = __xor__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Flags):
            return NotImplemented
        return self.enum_type is other.enum_type and self.bits == other.bits

    def __hash__(self) -> int:
        return hash((self.enum_type, self.bits))

    def __iter__(self) -> Iterator[E]:
        """Yield the members that are set, in the enum's declaration order."""
        return (member for member in self.enum_type if self.bits & to_bits(member))

    def __repr__(self) -> str:
        names = "|".join(member.name for member in self)
        return f"Flags({self.enum_type.__name__}: {names or 'none'})"


def make_flags(flag: E, *args: E) -> Flags[E]:
    """Return flags holding every given member."""
    result = Flags.of(flag)
    for other in args:
        result = result | other
    return result


def add_flag(flags: Flags[E], flag: E) -> Flags[E]:
    """Return ``flags`` with ``flag`` set."""
    return flags | flag


def remove_flag(flags: Flags[E], flag: E) -> Flags[E]:
    """Return ``flags`` with ``flag`` cleared."""
    return flags & ~Flags.of(flag)


def toggle_flag(flags: Flags[E], flag: E) -> Flags[E]:
    """Return ``flags`` with ``flag`` flipped."""
    return flags ^ flag


def has_flag(flags: Flags[E], flag: E) -> bool:
    """Return True if ``flag`` is set in ``flags``."""
    return bool(flags & flag)


def no_flags(enum_type: type[E]) -> Flags[E]:
    """Return an empty set of flags for ``enum_type``."""
    return Flags(enum_type)


def all_flags(enum_type: type[E]) -> Flags[E]:
    """Return flags with every bit set for ``enum_type``."""
    return ~no_flags(enum_type)


def to_list(flags: Flags[E]) -> list[E]:
    """Return the set members in declaration order."""
    return list(flags)