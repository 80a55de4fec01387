"""Tests for CLI configuration loading."""

from pathlib import Path

import pytest

from sitasi.cli.config import DEFAULTS, Config, get_config_paths, load_config


class TestConfig:
    """Test YAML configuration files."""

    def test_from_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("format: plain\nstyles:\n  - APA\n")

        assert Config.from_file(path) == {"format": "plain", "styles": ["APA"]}

    def test_from_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert Config.from_file(path) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("format: [plain")

        with pytest.raises(ValueError, match="Invalid YAML"):
            Config.from_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- plain\n")

        with pytest.raises(ValueError, match="mapping"):
            Config.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="Error reading config file"):
            Config.from_file(tmp_path / "missing.yaml")

    def test_merge_is_deep(self):
        merged = Config.merge_configs(
            {"messages": {"copy_error_title": "A", "copy_success_title": "B"}},
            {"messages": {"copy_error_title": "C"}},
        )

        assert merged == {
            "messages": {"copy_error_title": "C", "copy_success_title": "B"}
        }

    def test_config_paths(self, tmp_path):
        paths = get_config_paths()

        assert paths[0] == tmp_path / "xdg-config" / "sitasi" / "config.yaml"
        assert paths[1:] == [Path(".sitasi.yaml"), Path("sitasi.yaml")]


class TestLoadConfig:
    """Test configuration precedence."""

    def test_defaults(self):
        assert load_config() == DEFAULTS

    def test_project_files_override_user_file(self, tmp_path):
        user_config = tmp_path / "xdg-config" / "sitasi" / "config.yaml"
        user_config.parent.mkdir(parents=True)
        user_config.write_text("format: json\ntheme: minimal\n")
        Path("sitasi.yaml").write_text("format: plain\n")

        config = load_config()

        assert config["format"] == "plain"
        assert config["theme"] == "minimal"

    def test_broken_default_file_is_skipped(self):
        Path(".sitasi.yaml").write_text("format: [plain")

        assert load_config()["format"] == "table"

    def test_explicit_path_replaces_search(self, tmp_path):
        Path("sitasi.yaml").write_text("format: plain\n")
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("theme: minimal\n")

        config = load_config(explicit)

        assert config["format"] == "table"
        assert config["theme"] == "minimal"

    def test_explicit_path_errors_propagate(self, tmp_path):
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("format: [plain")

        with pytest.raises(ValueError):
            load_config(explicit)

    def test_environment_overrides(self, monkeypatch):
        Path("sitasi.yaml").write_text("format: plain\n")
        monkeypatch.setenv("SITASI_FORMAT", "json")
        monkeypatch.setenv("SITASI_THEME", "minimal")

        config = load_config()

        assert config["format"] == "json"
        assert config["theme"] == "minimal"
