# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel (no env var reading).
Env vars and config files are read by searchview.config.
"""

import pytest
from pydantic import ValidationError

from searchview.settings import LAYOUT_PRESETS, Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.margin == 5
        assert settings.line_height == 21
        assert settings.header_height == 56
        assert settings.padding == 16
        assert settings.collapse_threshold == 350
        assert settings.local_repo_prefix == "local/"
        assert settings.directory_separator == "/"

    def test_settings_with_custom_values(self):
        settings = Settings(margin=2, line_height=18, local_repo_prefix="")
        assert settings.margin == 2
        assert settings.line_height == 18
        assert settings.local_repo_prefix == ""

    def test_negative_margin_rejected(self):
        with pytest.raises(ValidationError):
            Settings(margin=-1)

    def test_chrome_height(self):
        assert Settings().chrome_height == 72

    def test_with_preset_compact(self):
        """Test Settings.with_preset('compact') applies correct values."""
        settings = Settings.with_preset("compact")
        assert settings.margin == 2
        assert settings.collapse_threshold == 210
        assert settings.line_height == 21

    def test_with_preset_roomy(self):
        settings = Settings.with_preset("roomy")
        assert settings.margin == 8
        assert settings.collapse_threshold == 560

    def test_with_preset_overrides(self):
        settings = Settings.with_preset("compact", margin=3)
        assert settings.margin == 3
        assert settings.collapse_threshold == 210

    def test_with_preset_does_not_mutate_presets(self):
        Settings.with_preset("compact", margin=3)
        assert LAYOUT_PRESETS["compact"]["margin"] == 2

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown preset"):
            Settings.with_preset("huge")  # type: ignore[arg-type]
