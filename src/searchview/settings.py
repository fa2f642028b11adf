# src/searchview/settings.py
"""Configuration management for searchview.

This module contains the behavioral settings used by the mappers and the
citation window calculator. Settings are passed programmatically - the
library itself does not read environment variables.

For applications that want env-based config, use ``searchview.config`` at
the application layer and pass the resulting Settings explicitly.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# Display presets for citation excerpts
# - "compact": less context around each citation, shorter collapsed block
# - "roomy": more context, taller collapsed block
LAYOUT_PRESETS: dict[str, dict[str, int]] = {
    "compact": {
        "margin": 2,
        "collapse_threshold": 210,
    },
    "roomy": {
        "margin": 8,
        "collapse_threshold": 560,
    },
}


class Settings(BaseModel):
    """Behavioral settings for searchview.

    Example:
        settings = Settings(margin=3)

        # Or start from a preset
        settings = Settings.with_preset("compact")
    """

    # Citation windows
    margin: int = Field(default=5, ge=0)  # Context lines above/below a citation

    # Rendered height (pixels)
    line_height: int = Field(default=21, ge=0)
    header_height: int = Field(default=56, ge=0)
    padding: int = Field(default=16, ge=0)
    collapse_threshold: int = Field(default=350, ge=0)

    # Result normalization
    local_repo_prefix: str = "local/"

    # File trees
    directory_separator: str = "/"

    @classmethod
    def with_preset(
        cls,
        preset: Literal["compact", "roomy"],
        **overrides: Any,
    ) -> Settings:
        """Create Settings from a layout preset.

        Args:
            preset: The layout preset to use.
            **overrides: Additional settings to override preset defaults.

        Returns:
            Settings instance with preset values applied.

        Example:
            settings = Settings.with_preset("compact", line_height=18)
        """
        if preset not in LAYOUT_PRESETS:
            raise ValueError(
                f"Unknown preset '{preset}'. Available presets: {list(LAYOUT_PRESETS.keys())}"
            )

        preset_settings: dict[str, Any] = LAYOUT_PRESETS[preset].copy()
        preset_settings.update(overrides)
        return cls(**preset_settings)

    @property
    def chrome_height(self) -> int:
        """Fixed height added to every rendered citation block."""
        return self.header_height + self.padding
