"""Pair an init call with a cleanup call around a ``with`` block."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Callable, Optional

__all__ = ["GenericGuard", "make_guard"]

_CO_VARARGS = 0x04


def _accepts(func: Callable[..., Any], count: int) -> bool:
    """Tell whether ``func`` can be called with ``count`` positional arguments."""
    target = func
    code = getattr(target, "__code__", None)
    if code is None:
        target = getattr(func, "__call__", None)
        code = getattr(target, "__code__", None)
    if code is None:
        return True
    if code.co_flags & _CO_VARARGS:
        return True
    positional = code.co_argcount
    if getattr(target, "__self__", None) is not None:
        positional -= 1
    defaults = getattr(target, "__defaults__", None) or ()
    required = positional - len(defaults)
    return required <= count <= positional


def _call(func: Callable[..., Any], args: tuple[Any, ...]) -> None:
    """Call ``func`` with ``args`` if it accepts them, otherwise with none."""
    if args and _accepts(func, len(args)):
        func(*args)
    else:
        func()


class GenericGuard:
    """Runs ``init_func`` when created and ``destroy_func`` when the block ends.

    Each function receives the shared arguments if it takes them, and is
    called without arguments otherwise.
    """

    def __init__(
        self,
        init_func: Callable[..., Any],
        destroy_func: Callable[..., Any],
        *args: Any,
    ) -> None:
        self._destroy_func = destroy_func
        self._arguments = args
        self._active = True
        _call(init_func, self._arguments)

    def __enter__(self) -> GenericGuard:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if self._active:
            self._active = False
            _call(self._destroy_func, self._arguments)
        return False


def make_guard(
    init_func: Callable[..., Any], destroy_func: Callable[..., Any], *args: Any
) -> GenericGuard:
    """Call ``init_func`` now and return a guard that calls ``destroy_func`` on exit."""
    return GenericGuard(init_func, destroy_func, *args)