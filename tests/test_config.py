# tests/test_config.py
"""Tests for config file and env var loading."""

import logging
import os

from searchview.config import (
    build_settings,
    find_config_file,
    get_settings,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    load_env_file,
    validate_config,
)


class TestFindConfigFile:
    def test_no_config(self, tmp_path):
        assert find_config_file(tmp_path) is None

    def test_finds_in_parent(self, tmp_path):
        (tmp_path / "searchview.yml").write_text("settings: {}\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == tmp_path / "searchview.yml"

    def test_yaml_preferred(self, tmp_path):
        (tmp_path / ".searchviewrc").write_text("")
        (tmp_path / "searchview.yaml").write_text("")

        assert find_config_file(tmp_path).name == "searchview.yaml"


class TestLoadConfig:
    def test_missing_file(self, tmp_path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "searchview.yaml"
        path.write_text("")
        assert load_config(path) == {}

    def test_searches_cwd(self, tmp_path):
        (tmp_path / "searchview.yaml").write_text("settings:\n  margin: 3\n")
        assert load_config() == {"settings": {"margin": 3}}

    def test_non_mapping_ignored(self, tmp_path, caplog):
        path = tmp_path / "searchview.yaml"
        path.write_text("- margin\n")

        with caplog.at_level(logging.WARNING, logger="searchview.config"):
            assert load_config(path) == {}
        assert "not a mapping" in caplog.text

    def test_unknown_keys_logged(self, tmp_path, caplog):
        path = tmp_path / "searchview.yaml"
        path.write_text("settings:\n  colour: red\n")

        with caplog.at_level(logging.WARNING, logger="searchview.config"):
            load_config(path)
        assert "colour" in caplog.text


class TestValidateConfig:
    def test_valid(self):
        assert validate_config({"settings": {"margin": 1, "preset": "compact"}}) == []

    def test_unknown_root_key(self):
        (warning,) = validate_config({"theme": "dark"})
        assert "theme" in warning

    def test_unknown_setting(self):
        (warning,) = validate_config({"settings": {"margn": 1}})
        assert "margn" in warning


class TestEnvSettings:
    def test_nothing_set(self):
        assert get_settings_from_env() == {}

    def test_int_settings(self, monkeypatch):
        monkeypatch.setenv("SEARCHVIEW_MARGIN", "3")
        monkeypatch.setenv("SEARCHVIEW_LINE_HEIGHT", "not-a-number")

        assert get_settings_from_env() == {"margin": 3}

    def test_string_settings(self, monkeypatch):
        monkeypatch.setenv("SEARCHVIEW_LOCAL_REPO_PREFIX", "")
        monkeypatch.setenv("SEARCHVIEW_PRESET", "roomy")

        assert get_settings_from_env() == {"local_repo_prefix": "", "preset": "roomy"}

    def test_empty_separator_falls_back(self, monkeypatch):
        monkeypatch.setenv("SEARCHVIEW_DIRECTORY_SEPARATOR", "")

        assert get_settings_from_env() == {"directory_separator": "/"}


class TestBuildSettings:
    def test_defaults(self):
        assert build_settings({}, {}).margin == 5

    def test_yaml_only_known_keys(self):
        yaml_settings = get_settings_from_yaml({"settings": {"margin": 2, "colour": "red"}})
        assert yaml_settings == {"margin": 2}

    def test_env_overrides_yaml(self):
        settings = build_settings({"settings": {"margin": 2}}, {"margin": 7})
        assert settings.margin == 7

    def test_preset_with_override(self):
        settings = build_settings({"settings": {"preset": "roomy", "margin": 1}}, {})
        assert settings.margin == 1
        assert settings.collapse_threshold == 560

    def test_get_settings_reads_file_and_env(self, tmp_path, monkeypatch):
        (tmp_path / "searchview.yaml").write_text("settings:\n  padding: 4\n")
        monkeypatch.setenv("SEARCHVIEW_MARGIN", "1")

        settings = get_settings()

        assert settings.padding == 4
        assert settings.margin == 1


class TestLoadEnvFile:
    def test_loads_values(self, tmp_path, monkeypatch):
        monkeypatch.delenv("SEARCHVIEW_MARGIN", raising=False)
        env_path = tmp_path / ".env"
        env_path.write_text("# comment\nSEARCHVIEW_MARGIN=4\n\n")

        load_env_file(env_path)

        assert os.environ["SEARCHVIEW_MARGIN"] == "4"
        monkeypatch.delenv("SEARCHVIEW_MARGIN")

    def test_existing_values_win(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SEARCHVIEW_MARGIN", "9")
        env_path = tmp_path / ".env"
        env_path.write_text("SEARCHVIEW_MARGIN=4\n")

        load_env_file(env_path)

        assert os.environ["SEARCHVIEW_MARGIN"] == "9"
