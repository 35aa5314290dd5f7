"""Well-known root directory resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from fsreport.settings import Settings
from fsreport.utils import xdg_documents_dir

log = logging.getLogger(__name__)

DEFAULT_UNIT_BASE = 1024
_UNIT_BASES = (1000, 1024)


def default_roots() -> list[Path]:
    """Return the platform's application-writable directories."""
    return [xdg_documents_dir()]


def resolve_roots(settings: Settings | None = None) -> list[Path]:
    """Return the ordered root directories to scan.

    ``report.roots`` in the settings file replaces the defaults when set.
    Relative, non-string and NUL-containing entries are ignored, duplicates are dropped
    while keeping first-seen order.
    """
    settings = settings or Settings.instance()
    configured = settings.roots
    if configured is None:
        return default_roots()
    if not isinstance(configured, list):
        log.warning("Setting 'report.roots' must be a list, using defaults")
        return default_roots()

    roots: list[Path] = []
    for raw in configured:
        if not isinstance(raw, str):
            log.warning("Ignoring non-string root: %r", raw)
            continue
        if "\0" in raw:
            log.warning("Ignoring root containing a NUL byte: %r", raw)
            continue
        path = Path(raw).expanduser()
        if not path.is_absolute():
            log.warning("Ignoring relative root: %s", raw)
            continue
        if path not in roots:
            roots.append(path)
    return roots


def resolve_unit_base(settings: Settings | None = None) -> int:
    """Return the configured size unit base (1024 or 1000)."""
    settings = settings or Settings.instance()
    base = settings.unit_base
    if base is None:
        return DEFAULT_UNIT_BASE
    if base not in _UNIT_BASES or isinstance(base, bool):
        log.warning("Unsupported 'report.unit_base' %r, using %d", base, DEFAULT_UNIT_BASE)
        return DEFAULT_UNIT_BASE
    return base
