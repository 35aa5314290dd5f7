"""File system report generation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from fsreport.core.capacity import VolumeQuery, capacity_block, query_capacity, statvfs_capacity
from fsreport.core.roots import resolve_roots, resolve_unit_base
from fsreport.core.walker import entry_line, walk_roots
from fsreport.models.attachment import Attachment
from fsreport.models.entry import SkippedEntry

log = logging.getLogger(__name__)

RootsProvider = Callable[[], Sequence[Path]]

ATTACHMENT_FILE_NAME = "file_system.txt"
ATTACHMENT_MIME_TYPE = "text/plain"


class FileSystemReportGenerator:
    """Builds the ``file_system.txt`` bug report attachment.

    The report lists every file below the root directories with its
    size, followed by a blank line and the capacity of the volume that
    hosts the first root. Unreadable roots and entries are left out;
    a volume that reports only some of its capacity figures raises
    ``IncompleteCapacityError``.

    Each call is independent and read-only, so one generator may be
    used from several threads at once.
    """

    def __init__(
        self,
        roots_provider: RootsProvider | None = None,
        volume_query: VolumeQuery | None = None,
        unit_base: int | None = None,
    ) -> None:
        self._roots_provider = roots_provider or resolve_roots
        self._volume_query = volume_query or statvfs_capacity
        self._unit_base = unit_base

    def build_report(self) -> str:
        """Return the report text."""
        roots = list(self._roots_provider())
        base = self._unit_base or resolve_unit_base()

        parts: list[str] = []
        listed = skipped = 0
        for result in walk_roots(roots):
            if isinstance(result, SkippedEntry):
                skipped += 1
                continue
            if result.size_bytes is None:
                continue
            parts.append(entry_line(result, base=base))
            listed += 1

        capacity = query_capacity(roots, self._volume_query)
        if capacity is not None:
            block = capacity_block(capacity, base=base)
            parts.append("\n")
            parts.append(block)

        log.debug(
            "Listed %d entries from %d roots (%d skipped), capacity %s",
            listed,
            len(roots),
            skipped,
            "included" if capacity is not None else "omitted",
        )
        return "".join(parts)

    def generate_attachment(self) -> Attachment:
        """Build the report and wrap it as a bug report attachment.

        File names that are not valid UTF-8 are written with backslash
        escapes so the payload always decodes.
        """
        return Attachment(
            file_name=ATTACHMENT_FILE_NAME,
            data=self.build_report().encode("utf-8", errors="backslashreplace"),
            mime_type=ATTACHMENT_MIME_TYPE,
        )


def generate_attachment() -> Attachment:
    """Generate the attachment for the configured roots and local volume."""
    return FileSystemReportGenerator().generate_attachment()
