"""
Unit tests for manifest loading, validation and script merging.
"""

import json

import pytest

from modmod.slides.manifest import (
    SENTINEL_SCRIPT,
    ManifestError,
    load_manifest,
    merge_scripts,
    validate_manifest,
    write_manifest,
)


GENERATED = {
    "dev-1_1": "slidev 1_1_overview.md",
    "build-1_1": "slidev build --download --out dist/1_1_overview --base /slides/1_1/ 1_1_overview.md",
    "export-1_1": "slidev export 1_1_overview.md",
}


class TestLoadManifest:
    """Tests for load_manifest."""

    def test_load_when_no_path_then_stub_without_scripts(self):
        manifest = load_manifest(None)
        assert isinstance(manifest, dict)
        assert "name" in manifest
        assert "scripts" not in manifest

    def test_load_when_path_then_document_order_kept(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"version": "1.0.0", "name": "x", "scripts": {"lint": "eslint ."}}', encoding="utf-8")

        manifest = load_manifest(path)

        assert list(manifest) == ["version", "name", "scripts"]

    def test_load_when_malformed_json_then_raises_manifest_error(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text('{"name": "x",', encoding="utf-8")

        with pytest.raises(ManifestError, match="Cannot parse manifest") as exc_info:
            load_manifest(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_load_when_missing_file_then_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            load_manifest(tmp_path / "missing.json")


class TestValidateManifest:
    """Tests for validate_manifest."""

    def test_validate_when_object_then_no_error(self):
        validate_manifest({"name": "x", "scripts": {"a": "b"}, "private": True})

    def test_validate_when_not_object_then_raises(self):
        with pytest.raises(ManifestError, match="<root>"):
            validate_manifest(["not", "an", "object"])

    def test_validate_when_scripts_not_object_then_raises_with_path(self):
        with pytest.raises(ManifestError) as exc_info:
            validate_manifest({"scripts": "slidev"})
        assert exc_info.value.path == "scripts"

    @pytest.mark.parametrize("name", [3, None, {"first": "x"}, ["x"]])
    def test_validate_when_name_not_string_then_accepted_and_overwritten(self, name):
        manifest = {"name": name, "scripts": {}}

        validate_manifest(manifest)
        merged = merge_scripts(manifest, "Track", {})

        assert merged["name"] == "track"


class TestMergeScripts:
    """Tests for merge_scripts."""

    def test_merge_when_scripts_absent_then_generated_become_scripts(self):
        merged = merge_scripts({"private": True}, "Intro to Systems", GENERATED)

        assert merged["name"] == "intro-to-systems"
        assert list(merged["scripts"]) == ["dev-1_1", "build-1_1", "export-1_1", SENTINEL_SCRIPT]
        assert merged["scripts"][SENTINEL_SCRIPT] == ""

    def test_merge_when_unrelated_scripts_then_kept_untouched(self):
        manifest = {"scripts": {"lint": "eslint .", "format": "prettier -w ."}}

        merged = merge_scripts(manifest, "Track", GENERATED)

        assert merged["scripts"]["lint"] == "eslint ."
        assert merged["scripts"]["format"] == "prettier -w ."
        assert list(merged["scripts"])[:2] == ["lint", "format"]

    def test_merge_when_key_collides_then_generated_value_wins(self):
        manifest = {"scripts": {"dev-1_1": "old command", "lint": "eslint ."}}

        merged = merge_scripts(manifest, "Track", GENERATED)

        assert merged["scripts"]["dev-1_1"] == GENERATED["dev-1_1"]
        assert list(merged["scripts"]) == ["lint", "dev-1_1", "build-1_1", "export-1_1", SENTINEL_SCRIPT]

    def test_merge_when_sentinel_exists_then_moved_last_and_emptied(self):
        manifest = {"scripts": {"_": "stale", "lint": "eslint ."}}

        merged = merge_scripts(manifest, "Track", {})

        assert list(merged["scripts"]) == ["lint", SENTINEL_SCRIPT]
        assert merged["scripts"][SENTINEL_SCRIPT] == ""

    def test_merge_when_no_generated_scripts_then_sentinel_only(self):
        merged = merge_scripts({}, "Track", {})
        assert merged["scripts"] == {SENTINEL_SCRIPT: ""}

    def test_merge_when_name_present_then_overwritten_in_place(self):
        manifest = {"name": "old", "version": "1.0.0"}

        merged = merge_scripts(manifest, "Foundations of Rust", {})

        assert list(merged)[:2] == ["name", "version"]
        assert merged["name"] == "foundations-of-rust"

    def test_merge_when_scripts_not_object_then_raises(self):
        with pytest.raises(ManifestError, match="scripts field is not an object"):
            merge_scripts({"scripts": ["dev"]}, "Track", GENERATED)

    def test_merge_does_not_modify_input(self):
        manifest = {"name": "old", "scripts": {"lint": "eslint ."}}
        merge_scripts(manifest, "Track", GENERATED)
        assert manifest == {"name": "old", "scripts": {"lint": "eslint ."}}


class TestWriteManifest:
    """Tests for write_manifest."""

    def test_write_when_manifest_then_pretty_printed_in_key_order(self, tmp_path):
        path = write_manifest(tmp_path / "package.json", {"name": "x", "scripts": {"b": "1", "a": "2"}})

        text = path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "name": "x",\n  "scripts": {\n    "b": "1",')
        assert list(json.loads(text)["scripts"]) == ["b", "a"]
