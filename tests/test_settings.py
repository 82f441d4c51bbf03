"""Tests for settings loading."""

import json

import pytest

from lintversion.settings import LintContext, SettingsError, load_settings


class TestLoadSettings:
    def test_yaml_settings_block(self, tmp_path):
        path = tmp_path / "lint.yaml"
        path.write_text(
            "settings:\n"
            "  react:\n"
            "    version: detect\n"
            "    defaultVersion: '18.2.0'\n"
        )
        assert load_settings(str(path)) == {
            "react": {"version": "detect", "defaultVersion": "18.2.0"}
        }

    def test_yaml_without_settings_key(self, tmp_path):
        path = tmp_path / "lint.yml"
        path.write_text("react:\n  version: 15.0\n  flowVersion: '0.92'\n")
        settings = load_settings(str(path))
        assert settings["react"]["version"] == 15.0
        assert settings["react"]["flowVersion"] == "0.92"

    def test_json(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"settings": {"react": {"version": "16.14.0"}}}))
        assert load_settings(str(path)) == {"react": {"version": "16.14.0"}}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_settings(str(path)) == {}

    def test_empty_json_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("")
        assert load_settings(str(path)) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(SettingsError, match="not found"):
            load_settings(str(tmp_path / "nope.yaml"))

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("react: [unclosed\n")
        with pytest.raises(SettingsError):
            load_settings(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{")
        with pytest.raises(SettingsError):
            load_settings(str(path))

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- react\n")
        with pytest.raises(SettingsError, match="mapping"):
            load_settings(str(path))

    def test_settings_error_is_value_error(self):
        assert issubclass(SettingsError, ValueError)


class TestLintContext:
    def test_get_filename(self):
        ctx = LintContext(filename="/repo/src/App.jsx")
        assert ctx.get_filename() == "/repo/src/App.jsx"
        assert ctx.settings == {}

    def test_from_file(self, tmp_path):
        path = tmp_path / "lint.yaml"
        path.write_text("settings:\n  react:\n    version: '17.0'\n")
        ctx = LintContext.from_file(str(path), "/repo/App.jsx")
        assert ctx.settings == {"react": {"version": "17.0"}}
        assert ctx.get_filename() == "/repo/App.jsx"
