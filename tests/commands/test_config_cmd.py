# tests/commands/test_config_cmd.py
"""Tests for the config command."""

from searchview.commands import config_cmd


def _by_name(result):
    return {s.name: s for s in result.settings}


class TestConfigCommand:
    """Tests for config_cmd.config()."""

    def test_config_returns_success(self) -> None:
        """Config always returns success (settings have defaults)."""
        result = config_cmd.config()

        assert result.success is True
        assert result.config_path is None

    def test_config_has_settings(self) -> None:
        result = config_cmd.config()

        settings = _by_name(result)
        assert settings["margin"].value == "5"
        assert settings["margin"].source == "default"
        assert settings["local_repo_prefix"].value == "'local/'"

    def test_sources(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "searchview.yaml").write_text("settings:\n  margin: 3\n  line_height: 18\n")
        monkeypatch.setenv("SEARCHVIEW_LINE_HEIGHT", "20")

        result = config_cmd.config()

        settings = _by_name(result)
        assert result.config_path.endswith("searchview.yaml")
        assert (settings["margin"].value, settings["margin"].source) == ("3", "yaml")
        assert (settings["line_height"].value, settings["line_height"].source) == ("20", "env var")
        assert settings["padding"].source == "default"

    def test_preset_source(self, monkeypatch) -> None:
        monkeypatch.setenv("SEARCHVIEW_PRESET", "roomy")

        result = config_cmd.config()

        settings = _by_name(result)
        assert (settings["margin"].value, settings["margin"].source) == ("8", "preset")

    def test_unknown_keys_warned(self, tmp_path) -> None:
        (tmp_path / "searchview.yaml").write_text("settings:\n  colour: red\nextras: 1\n")

        result = config_cmd.config()

        assert result.success is True
        assert len(result.warnings) == 2

    def test_invalid_value(self, tmp_path) -> None:
        config_path = tmp_path / "custom.yaml"
        config_path.write_text("settings:\n  margin: -2\n")

        result = config_cmd.config(config_path=config_path)

        assert result.success is False
        assert result.error.startswith("Invalid configuration")
