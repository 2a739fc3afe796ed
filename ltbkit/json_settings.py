"""Settings values kept in a named slot of a JSON file."""

from __future__ import annotations

import enum
import json
import logging
import os
from pathlib import Path
from types import TracebackType
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar, Union

from ltbkit.enum_flags import Flags, has_flag, no_flags

__all__ = [
    "JsonSettingsFlag",
    "JsonSettings",
    "assign_if_present",
    "convert_to_json_and_back",
]

_logger = logging.getLogger(__name__)

T = TypeVar("T")

PathLike = Union[str, "os.PathLike[str]"]


class JsonSettingsFlag(enum.Enum):
    """Options changing when settings are loaded, saved and reported."""

    NO_IMPLICIT_LOAD = 0
    NO_IMPLICIT_SAVE = 1
    PRINT_DEBUG_MESSAGES = 2


def _json_default(obj: Any) -> Any:
    if isinstance(obj, os.PathLike):
        return os.fspath(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _dumps(data: Any, indent: Optional[int] = None) -> str:
    return json.dumps(
        data, indent=indent, sort_keys=True, ensure_ascii=False, default=_json_default
    )


def _read_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def _as_flags(
    flags: Union[Flags[JsonSettingsFlag], JsonSettingsFlag, None],
) -> Flags[JsonSettingsFlag]:
    if flags is None:
        return no_flags(JsonSettingsFlag)
    if isinstance(flags, JsonSettingsFlag):
        return Flags.of(flags)
    if isinstance(flags, Flags) and flags.enum_type is JsonSettingsFlag:
        return flags
    raise TypeError(f"expected JsonSettingsFlag flags, not {flags!r}")


class JsonSettings(Generic[T]):
    """Loads ``value`` from ``file[name]`` on creation and saves it back on close."""

    def __init__(
        self,
        file: PathLike,
        name: str,
        value: Optional[T] = None,
        flags: Union[Flags[JsonSettingsFlag], JsonSettingsFlag, None] = None,
        to_json: Optional[Callable[[T], Any]] = None,
        from_json: Optional[Callable[[Any], T]] = None,
    ) -> None:
        self.value = value
        self._file = Path(file)
        self._name = name
        self._flags = _as_flags(flags)
        self._to_json = to_json
        self._from_json = from_json
        self._closed = False

        if not has_flag(self._flags, JsonSettingsFlag.NO_IMPLICIT_LOAD):
            self.load_settings()

    @property
    def file(self) -> Path:
        return self._file

    @property
    def name(self) -> str:
        return self._name

    @property
    def flags(self) -> Flags[JsonSettingsFlag]:
        return self._flags

    def _debug(self) -> bool:
        return has_flag(self._flags, JsonSettingsFlag.PRINT_DEBUG_MESSAGES)

    def _path(self, path_override: Optional[PathLike]) -> Path:
        return Path(path_override) if path_override else self._file

    def load_settings(self, path_override: Optional[PathLike] = None) -> None:
        """Read the value from the JSON file if it exists and holds the name."""
        path = self._path(path_override)
        if path.exists():
            data = _read_json(path)
            if isinstance(data, dict) and self._name in data:
                raw = data[self._name]
                self.value = self._from_json(raw) if self._from_json else raw
            if self._debug():
                _logger.debug("Loaded JSON '%s' from '%s'", self._name, path)
        elif self._debug():
            _logger.debug(
                "JSON '%s' not loaded. File does not exist: '%s'", self._name, path
            )

    def save_settings(self, path_override: Optional[PathLike] = None) -> None:
        """Write the value under the name, keeping the file's other entries."""
        path = self._path(path_override)
        data: Any = {}
        if path.exists():
            data = _read_json(path)
            if data is None:
                data = {}
            elif not isinstance(data, dict):
                raise ValueError(f"JSON in '{path}' is not an object")

        data[self._name] = self._to_json(self.value) if self._to_json else self.value

        path.write_text(_dumps(data, indent=2) + "\n", encoding="utf-8")

        if self._debug():
            _logger.debug("Saved JSON '%s' to '%s'", self._name, path)

    def close(self) -> None:
        """Save once, unless implicit saving is turned off."""
        if self._closed:
            return
        self._closed = True
        if not has_flag(self._flags, JsonSettingsFlag.NO_IMPLICIT_SAVE):
            self.save_settings()

    def __enter__(self) -> JsonSettings[T]:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        self.close()
        return False


def assign_if_present(data: Any, key: str, default: Any = None) -> Any:
    """Return ``data[key]`` if ``data`` is an object holding ``key``, else ``default``."""
    if isinstance(data, Mapping) and key in data:
        return data[key]
    return default


def convert_to_json_and_back(
    value: Any,
    to_json: Optional[Callable[[Any], Any]] = None,
    from_json: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """Encode ``value`` as JSON text and decode it again; useful for testing."""
    encoded = to_json(value) if to_json else value
    decoded = json.loads(_dumps(encoded))
    return from_json(decoded) if from_json else decoded