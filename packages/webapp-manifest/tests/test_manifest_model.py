# SPDX-License-Identifier: MIT
"""Tests for the manifest model, schema check, and persistence."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from webapp_manifest import (
    IconDescriptor,
    Manifest,
    ManifestError,
    ManifestValidationError,
    check_manifest,
    consume_updated_manifest,
    load_manifest,
    write_manifest,
)


SAMPLE_MANIFEST = {
    "name": "Example Application",
    "short_name": "Example",
    "start_url": "https://www.example.com/app/",
    "icons": [
        {"src": "icon-48.png", "sizes": "48x48", "type": "image/png"},
        {"src": "icon-multi.png", "sizes": "72x72 96x96"},
    ],
    "theme_color": "#336699",
}


class TestIconDescriptor:
    """Tests for IconDescriptor."""

    def test_single_size_token(self):
        assert IconDescriptor(sizes="48x48").size_tokens() == ["48x48"]

    def test_multiple_size_tokens(self):
        assert IconDescriptor(sizes="72x72  96x96\t144x144").size_tokens() == [
            "72x72",
            "96x96",
            "144x144",
        ]

    def test_empty_sizes(self):
        assert IconDescriptor().size_tokens() == []

    def test_non_string_sizes_yield_no_tokens(self):
        assert IconDescriptor(sizes=48).size_tokens() == []  # type: ignore[arg-type]


class TestManifestFromDict:
    """Tests for Manifest.from_dict."""

    def test_parses_members(self):
        manifest = Manifest.from_dict(SAMPLE_MANIFEST)
        assert manifest.start_url == "https://www.example.com/app/"
        assert manifest.short_name == "Example"
        assert manifest.name == "Example Application"
        assert [icon.sizes for icon in manifest.icons] == ["48x48", "72x72 96x96"]

    def test_short_name_falls_back_to_name(self):
        manifest = Manifest.from_dict({"start_url": "https://a.com/", "name": "Full Name"})
        assert manifest.short_name == "Full Name"

    def test_unknown_members_preserved(self):
        manifest = Manifest.from_dict(SAMPLE_MANIFEST)
        assert manifest.to_dict()["theme_color"] == "#336699"

    def test_missing_start_url_rejected(self):
        with pytest.raises(ManifestValidationError, match="start_url"):
            Manifest.from_dict({"short_name": "No URL"})

    def test_wrong_icons_type_rejected(self):
        with pytest.raises(ManifestValidationError) as exc_info:
            Manifest.from_dict({"start_url": "https://a.com/", "icons": "icon.png"})
        assert exc_info.value.errors[0].field == "icons"


class TestCheckManifest:
    """Tests for check_manifest."""

    def test_valid_manifest(self):
        assert check_manifest(SAMPLE_MANIFEST).valid

    def test_non_dict_rejected(self):
        result = check_manifest(["not", "a", "manifest"])
        assert not result.valid
        assert result.errors[0].field == "<root>"

    def test_nested_error_path(self):
        result = check_manifest({"start_url": "https://a.com/", "icons": [{"sizes": 48}]})
        assert not result.valid
        assert result.errors[0].field == "icons[0].sizes"


class TestPersistence:
    """Tests for loading, writing, and updating manifest files."""

    def test_load_manifest(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text(json.dumps(SAMPLE_MANIFEST), encoding="utf-8")

        manifest = load_manifest(path)

        assert manifest.short_name == "Example"
        assert manifest.generated_from == str(path)

    def test_load_missing_file(self, tmp_path: Path):
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path: Path):
        path = tmp_path / "manifest.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_manifest(path)

    def test_write_manifest_creates_parents(self, tmp_path: Path):
        manifest = Manifest.from_dict(SAMPLE_MANIFEST)
        output = write_manifest(manifest, tmp_path / "cordova" / "manifest.json")

        assert output.exists()
        assert json.loads(output.read_text(encoding="utf-8")) == SAMPLE_MANIFEST

    def test_consume_updated_manifest(self, tmp_path: Path):
        (tmp_path / "manifest.json").write_text('{"start_url": "old"}', encoding="utf-8")
        (tmp_path / "manifest.updated.json").write_text('{"start_url": "new"}', encoding="utf-8")

        assert consume_updated_manifest(tmp_path) is True

        assert json.loads((tmp_path / "manifest.json").read_text()) == {"start_url": "new"}
        assert not (tmp_path / "manifest.updated.json").exists()

    def test_consume_updated_manifest_is_idempotent(self, tmp_path: Path):
        (tmp_path / "manifest.json").write_text('{"start_url": "old"}', encoding="utf-8")

        assert consume_updated_manifest(tmp_path) is False
        assert consume_updated_manifest(tmp_path) is False
        assert json.loads((tmp_path / "manifest.json").read_text()) == {"start_url": "old"}
