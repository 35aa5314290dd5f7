"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB")


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def xdg_documents_dir() -> Path:
    """Return XDG_DOCUMENTS_DIR, defaulting to ~/Documents when unset or empty."""
    return Path(os.environ.get("XDG_DOCUMENTS_DIR") or Path.home() / "Documents")


def bytes_to_human(size_bytes: int, *, base: int = 1024, precision: int = 2) -> str:
    """Convert byte count to a human-readable string.

    Fractional digits are always zero-padded to ``precision`` so that
    sizes line up in columns, e.g. ``1.00 MB`` rather than ``1 MB``.
    Counts below one ``base`` unit are shown as whole bytes.

    Args:
        size_bytes: Non-negative byte count.
        base: 1024 for binary units, 1000 for decimal units.
        precision: Number of fractional digits.
    """
    if size_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {size_bytes}")
    if base not in (1000, 1024):
        raise ValueError(f"Unsupported unit base: {base}")

    if size_bytes == 1:
        return "1 byte"
    if size_bytes < base:
        return f"{size_bytes} bytes"

    value = size_bytes / base
    index = 0
    # Roll over when rounding would print e.g. "1024.00 KB"
    while index < len(_UNITS) - 1 and round(value, precision) >= base:
        value /= base
        index += 1
    return f"{value:.{precision}f} {_UNITS[index]}"


def format_elapsed(seconds: float) -> str:
    """Format an elapsed time as a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds) // 60
    secs = seconds - minutes * 60
    return f"{minutes}m {secs:.0f}s"
