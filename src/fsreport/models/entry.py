"""Walk result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union


@dataclass(frozen=True, slots=True)
class FileEntry:
    """Single file or directory discovered during a walk.

    ``size_bytes`` is ``None`` for directories, whose byte size is not
    meaningful. ``created`` is only populated on platforms that expose
    a birth time.
    """

    path: Path
    size_bytes: int | None
    is_dir: bool = False
    created: float | None = None
    modified: float | None = None


@dataclass(frozen=True, slots=True)
class SkippedEntry:
    """Node whose metadata or contents could not be read."""

    path: Path
    reason: str


WalkResult = Union[FileEntry, SkippedEntry]
