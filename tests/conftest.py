"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest

from fsreport.settings import Settings


@pytest.fixture(autouse=True)
def isolate_settings(tmp_path, monkeypatch):
    """Redirect the settings file to a temp directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setattr(Settings, "_instance", None)
    return config_home / "fsreport" / "settings.json"


@pytest.fixture
def deny_scandir(monkeypatch):
    """Make ``os.scandir`` fail with EACCES for the paths added to the returned set."""
    denied: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if os.fspath(path) in denied:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return denied


class _UnreadableEntry:
    def __init__(self, entry: os.DirEntry) -> None:
        self.path = entry.path
        self.name = entry.name

    def stat(self, *, follow_symlinks: bool = True):
        raise PermissionError(13, "Permission denied", self.path)


class _BreakingIterator:
    def __init__(self, it, names: set[str]) -> None:
        self._it = it
        self._names = names

    def __iter__(self):
        return self

    def __next__(self):
        entry = next(self._it)
        if entry.name in self._names:
            return _UnreadableEntry(entry)
        return entry

    def close(self) -> None:
        self._it.close()


@pytest.fixture
def break_stat(monkeypatch):
    """Make metadata reads fail for entries whose name is in the returned set."""
    names: set[str] = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        return _BreakingIterator(real_scandir(path), names)

    monkeypatch.setattr(os, "scandir", fake_scandir)
    return names
