"""Bug report attachment dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attachment:
    """Named, typed payload handed to a bug report bundle."""

    file_name: str
    data: bytes
    mime_type: str

    @property
    def text(self) -> str:
        """The payload decoded as UTF-8."""
        return self.data.decode("utf-8")
