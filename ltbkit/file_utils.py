"""Reading whole files as bytes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

from ltbkit.error import make_error

__all__ = ["get_binary_file_contents", "get_binary_files_contents"]

PathLike = Union[str, "os.PathLike[str]"]


def get_binary_file_contents(file_path: PathLike) -> bytes:
    """Return the contents of a file; raise an Error if it cannot be opened."""
    path = Path(file_path)
    try:
        return path.read_bytes()
    except OSError:
        raise make_error(f"Failed to open file '{path}'") from None


def get_binary_files_contents(file_paths: Iterable[PathLike]) -> list[bytes]:
    """Return the contents of each file in order; stop at the first failure."""
    return [get_binary_file_contents(path) for path in file_paths]