"""Small helpers for searching and pruning containers."""

from __future__ import annotations

from collections.abc import MutableMapping, MutableSequence, MutableSet
from typing import Any, Callable, Hashable, Iterable, Mapping, TypeVar

from ltbkit.error import make_error

__all__ = [
    "has_key",
    "has_item",
    "has_item_if",
    "remove_all_by_key",
    "remove_all_by_value",
    "remove_all_by_predicate",
    "iterate_with_removals",
    "find_first_available",
]

T = TypeVar("T")


def has_key(mapping: Mapping[Any, Any], key: Hashable) -> bool:
    """Return True if ``key`` is in ``mapping``."""
    return key in mapping


def has_item(items: Iterable[T], item: T) -> bool:
    """Return True if any element equals ``item``."""
    return any(element == item for element in items)


def has_item_if(items: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """Return True if ``predicate`` holds for any element."""
    return any(predicate(element) for element in items)


def remove_all_by_key(mapping: MutableMapping[Any, Any], key: Hashable) -> int:
    """Remove ``key`` from ``mapping`` and return how many entries went."""
    if key in mapping:
        del mapping[key]
        return 1
    return 0


def remove_all_by_value(items: MutableSequence[T], value: T) -> int:
    """Remove every element equal to ``value`` in place; return the count removed."""
    return remove_all_by_predicate(items, lambda element: element == value)


def remove_all_by_predicate(
    items: MutableSequence[T], predicate: Callable[[T], Any]
) -> int:
    """Remove every element matching ``predicate`` in place; return the count removed."""
    kept = [element for element in items if not predicate(element)]
    removed = len(items) - len(kept)
    items[:] = kept
    return removed


def iterate_with_removals(items: Any, predicate: Callable[[Any], Any]) -> None:
    """Visit each element once in order, removing those for which ``predicate`` holds.

    Lists and other mutable sequences pass elements; sets pass members;
    mappings pass ``(key, value)`` pairs.
    """
    if isinstance(items, MutableMapping):
        doomed = [key for key, value in list(items.items()) if predicate((key, value))]
        for key in doomed:
            del items[key]
    elif isinstance(items, MutableSet):
        doomed = [member for member in list(items) if predicate(member)]
        for member in doomed:
            items.discard(member)
    elif isinstance(items, MutableSequence):
        items[:] = [element for element in list(items) if not predicate(element)]
    else:
        raise TypeError(f"cannot remove elements from {type(items).__name__}")


def find_first_available(
    preferred_values: Iterable[T], available_values: Iterable[T]
) -> T:
    """Return the first preferred value that is also available.

    Raises an :class:`~ltbkit.error.Error` when nothing is available or
    none of the preferred values are.
    """
    preferred = list(preferred_values)
    available = list(available_values)
    type_name = type(preferred[0]).__name__ if preferred else "object"

    if not available:
        raise make_error(f"No available {type_name} values")

    for value in preferred:
        if value in available:
            return value

    raise make_error(f"None of the preferred {type_name} values available.")