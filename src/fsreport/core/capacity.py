"""Volume capacity querying and formatting."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Sequence

from fsreport.models.capacity import VolumeCapacity
from fsreport.utils import bytes_to_human

log = logging.getLogger(__name__)

VolumeQuery = Callable[[Path], VolumeCapacity]

_LABELS = (
    ("available", "Available Capacity:         "),
    ("important", "  for Important Usage:      "),
    ("opportunistic", "  for Opportunistic Usage:  "),
    ("total", "Total Capacity:             "),
)


class FileSystemReportError(Exception):
    """Base error for report generation failures."""


class IncompleteCapacityError(FileSystemReportError):
    """The volume was found but did not report every capacity metric."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"Volume query returned no value for: {', '.join(self.missing)}")


def statvfs_capacity(path: Path) -> VolumeCapacity:
    """Query the volume hosting *path*.

    On POSIX, blocks reserved for privileged writers count towards the
    important-usage figure but not towards plain available space. Other
    platforms only expose a single free figure, used for all three.

    Raises:
        OSError: If *path* does not resolve to a mounted volume.
    """
    if hasattr(os, "statvfs"):
        st = os.statvfs(path)
        available = st.f_bavail * st.f_frsize
        return VolumeCapacity(
            available=available,
            important=st.f_bfree * st.f_frsize,
            opportunistic=available,
            total=st.f_blocks * st.f_frsize,
        )

    usage = shutil.disk_usage(path)
    return VolumeCapacity(
        available=usage.free,
        important=usage.free,
        opportunistic=usage.free,
        total=usage.total,
    )


def query_capacity(roots: Sequence[Path], volume_query: VolumeQuery = statvfs_capacity) -> VolumeCapacity | None:
    """Query capacity for the volume hosting the first root.

    Returns None when there is no root or the volume cannot be resolved.
    """
    if not roots:
        log.info("No root directory available, skipping capacity summary")
        return None
    try:
        return volume_query(roots[0])
    except OSError as e:
        log.warning("Cannot query volume for %s: %s", roots[0], e)
        return None


def capacity_block(capacity: VolumeCapacity, *, base: int = 1024) -> str:
    """Format the four-line capacity summary.

    Raises:
        IncompleteCapacityError: If any metric is missing.
    """
    missing = capacity.missing()
    if missing:
        raise IncompleteCapacityError(missing)
    return "\n".join(
        f"{label}{bytes_to_human(getattr(capacity, name), base=base)}"
        for name, label in _LABELS
    )
