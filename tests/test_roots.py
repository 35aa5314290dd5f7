"""Tests for root resolution and settings."""

from __future__ import annotations

import json
from pathlib import Path

from fsreport.core.roots import default_roots, resolve_roots, resolve_unit_base
from fsreport.settings import Settings


class TestDefaultRoots:
    def test_documents_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", str(tmp_path / "Docs"))
        assert default_roots() == [tmp_path / "Docs"]

    def test_empty_documents_dir_treated_as_unset(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", "")
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        assert default_roots() == [tmp_path / "Documents"]

    def test_documents_dir_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("XDG_DOCUMENTS_DIR", raising=False)
        monkeypatch.setattr(Path, "home", staticmethod(lambda: tmp_path))
        assert default_roots() == [tmp_path / "Documents"]


class TestResolveRoots:
    def test_defaults_when_unset(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", str(tmp_path))
        assert resolve_roots() == [tmp_path]

    def test_configured_roots_keep_order(self):
        Settings.instance().set("report.roots", ["/b", "/a", "/c"])
        assert resolve_roots() == [Path("/b"), Path("/a"), Path("/c")]

    def test_invalid_entries_ignored(self):
        Settings.instance().set("report.roots", ["/a", "relative/dir", 42, "/a", "/b"])
        assert resolve_roots() == [Path("/a"), Path("/b")]

    def test_nul_byte_entries_ignored(self):
        Settings.instance().set("report.roots", ["/a\0b", "/c"])
        assert resolve_roots() == [Path("/c")]

    def test_empty_list_means_no_roots(self):
        Settings.instance().set("report.roots", [])
        assert resolve_roots() == []

    def test_non_list_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DOCUMENTS_DIR", str(tmp_path))
        Settings.instance().set("report.roots", "/not/a/list")
        assert resolve_roots() == [tmp_path]

    def test_explicit_settings_instance(self, tmp_path):
        settings = Settings(tmp_path / "other.json")
        settings.set("report.roots", ["/explicit"])
        assert resolve_roots(settings) == [Path("/explicit")]


class TestResolveUnitBase:
    def test_default(self):
        assert resolve_unit_base() == 1024

    def test_decimal(self):
        Settings.instance().set("report.unit_base", 1000)
        assert resolve_unit_base() == 1000

    def test_unsupported_value(self):
        Settings.instance().set("report.unit_base", 512)
        assert resolve_unit_base() == 1024


class TestSettings:
    def test_dot_notation_roundtrip(self, isolate_settings):
        settings = Settings.instance()
        settings.set("report.roots", ["/x"])
        assert settings.get("report.roots") == ["/x"]
        assert settings.get("report.missing", "fallback") == "fallback"
        assert json.loads(isolate_settings.read_text()) == {"report": {"roots": ["/x"]}}

    def test_reloads_from_disk(self, isolate_settings):
        Settings.instance().set("report.unit_base", 1000)
        assert Settings(isolate_settings).get("report.unit_base") == 1000

    def test_corrupt_file_ignored(self, isolate_settings):
        isolate_settings.parent.mkdir(parents=True)
        isolate_settings.write_text("{not json", encoding="utf-8")
        assert Settings(isolate_settings).get("report.roots") is None

    def test_non_object_file_ignored(self, isolate_settings):
        isolate_settings.parent.mkdir(parents=True)
        isolate_settings.write_text("[1, 2]", encoding="utf-8")
        assert Settings(isolate_settings).get("report") is None

    def test_typed_accessors(self, isolate_settings):
        settings = Settings.instance()
        assert settings.roots is None
        assert settings.unit_base is None

        settings.roots = ["/data"]
        settings.unit_base = 1000
        assert settings.get("report.roots") == ["/data"]
        assert json.loads(isolate_settings.read_text()) == {"report": {"roots": ["/data"], "unit_base": 1000}}

    def test_instance_is_shared(self):
        assert Settings.instance() is Settings.instance()
