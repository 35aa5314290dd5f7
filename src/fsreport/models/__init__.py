"""fsreport data models."""

from fsreport.models.attachment import Attachment
from fsreport.models.capacity import VolumeCapacity
from fsreport.models.entry import FileEntry, SkippedEntry, WalkResult

__all__ = [
    "Attachment",
    "FileEntry",
    "SkippedEntry",
    "VolumeCapacity",
    "WalkResult",
]
