"""Settings used to create an operating system window."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

__all__ = ["WindowSettings"]


def _pair(values: Iterable[int], field: str) -> tuple[int, int]:
    items = tuple(values)
    if len(items) != 2:
        raise ValueError(f"{field} must have exactly two components, got {len(items)}")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise TypeError(f"{field} components must be integers, not {item!r}")
    return items[0], items[1]


@dataclass(frozen=True)
class WindowSettings:
    """How a window should look when it is first created."""

    title: str = "Window"
    """The text shown in the title bar."""

    transparent_background: bool = False
    """If true, the alpha channel of the window will be transparent."""

    resizable: bool = True
    """If true, the window can be resized."""

    title_bar: bool = True
    """If true, the window has a title bar."""

    initial_size: Optional[tuple[int, int]] = None
    """Initial width and height; full screen if None."""

    initial_position: Optional[tuple[int, int]] = None
    """Initial position relative to the monitor; chosen by the system if None."""

    def __post_init__(self) -> None:
        if self.initial_size is not None:
            size = _pair(self.initial_size, "initial_size")
            if min(size) < 0:
                raise ValueError(f"initial_size must not be negative, got {size}")
            object.__setattr__(self, "initial_size", size)
        if self.initial_position is not None:
            position = _pair(self.initial_position, "initial_position")
            object.__setattr__(self, "initial_position", position)