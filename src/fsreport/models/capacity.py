"""Volume capacity snapshot."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class VolumeCapacity:
    """Free and total byte counts for the volume hosting a path.

    A metric is ``None`` when the volume query could not provide it.
    """

    available: int | None
    important: int | None
    opportunistic: int | None
    total: int | None

    def missing(self) -> list[str]:
        """Names of the metrics the query did not return."""
        return [f.name for f in fields(self) if getattr(self, f.name) is None]
