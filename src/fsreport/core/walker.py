"""Read-only recursive directory listing."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, Iterator

from fsreport.models.entry import FileEntry, SkippedEntry, WalkResult
from fsreport.utils import bytes_to_human

log = logging.getLogger(__name__)


def walk(root: Path | str) -> Iterator[WalkResult]:
    """Yield every node below *root*, depth-first.

    Each directory is yielded before its contents. Sibling order is
    whatever ``os.scandir`` returns. Symlinks are reported but never
    followed.

    Nothing raised by the filesystem escapes: a root or subdirectory
    that cannot be opened, or an entry that cannot be stat'ed, is
    yielded as a ``SkippedEntry`` and the walk carries on. A path the
    OS rejects outright (e.g. one containing a NUL byte) is skipped too.
    """
    root_path = Path(os.path.abspath(root))
    try:
        root_iter = os.scandir(root_path)
    except (OSError, ValueError) as e:
        log.debug("Cannot open root directory %s: %s", root_path, e)
        yield SkippedEntry(path=root_path, reason=_reason(e))
        return

    stack: list[tuple[Path, Iterator[os.DirEntry]]] = [(root_path, root_iter)]
    try:
        while stack:
            current, it = stack[-1]
            try:
                dir_entry = next(it)
            except StopIteration:
                stack.pop()
                _close(it)
                continue
            except OSError as e:
                log.debug("Cannot finish reading %s: %s", current, e)
                stack.pop()
                _close(it)
                yield SkippedEntry(path=current, reason=_reason(e))
                continue

            result = _read_entry(dir_entry)
            yield result

            if isinstance(result, FileEntry) and result.is_dir:
                try:
                    stack.append((result.path, os.scandir(result.path)))
                except (OSError, ValueError) as e:
                    log.debug("Cannot open directory %s: %s", result.path, e)
                    yield SkippedEntry(path=result.path, reason=_reason(e))
    finally:
        for _, it in stack:
            _close(it)


def walk_roots(roots: Iterable[Path | str]) -> Iterator[WalkResult]:
    """Walk each root in the given order."""
    for root in roots:
        yield from walk(root)


def entry_line(entry: FileEntry, *, base: int = 1024) -> str:
    """Format one report line: ``<size> <absolute path>``."""
    if entry.size_bytes is None:
        raise ValueError(f"Entry has no size: {entry.path}")
    return f"{bytes_to_human(entry.size_bytes, base=base)} {entry.path}\n"


def _read_entry(dir_entry: os.DirEntry) -> WalkResult:
    path = Path(dir_entry.path)
    try:
        st = dir_entry.stat(follow_symlinks=False)
    except OSError as e:
        log.debug("Cannot read metadata for %s: %s", path, e)
        return SkippedEntry(path=path, reason=_reason(e))

    is_dir = stat.S_ISDIR(st.st_mode)
    return FileEntry(
        path=path,
        size_bytes=None if is_dir else st.st_size,
        is_dir=is_dir,
        created=getattr(st, "st_birthtime", None),
        modified=st.st_mtime,
    )


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


def _close(it: Iterator[os.DirEntry]) -> None:
    close = getattr(it, "close", None)
    if close is not None:
        close()
