# src/searchview/commands/config_cmd.py
"""Config command - report the effective settings and where each came from."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from searchview.commands.base import ConfigResult, SettingInfo
from searchview.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    validate_config,
)


def _source_of(key: str, yaml_values: dict[str, Any], env_values: dict[str, Any]) -> str:
    for source, values in (("env var", env_values), ("yaml", yaml_values)):
        if key in values:
            return source
    if "preset" in env_values or "preset" in yaml_values:
        return "preset"
    return "default"


def _display(value: Any) -> str:
    # Quote strings so empty prefixes stay visible
    return repr(value) if isinstance(value, str) else str(value)


def config(config_path: str | Path | None = None) -> ConfigResult:
    """Resolve settings the same way the other commands do.

    Args:
        config_path: Config file to use instead of the discovered one

    Returns:
        ConfigResult listing every setting with its value and source, plus
        warnings about unknown keys in the config file
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    file_config = load_config(path)
    env_values = get_settings_from_env()

    try:
        settings = build_settings(file_config, env_values)
    except ValueError as e:
        return ConfigResult(success=False, error=f"Invalid configuration: {e}")

    yaml_values = get_settings_from_yaml(file_config)
    found = path is not None and path.exists()
    return ConfigResult(
        success=True,
        config_path=str(path) if found else None,
        warnings=validate_config(file_config, path) if found else [],
        settings=[
            SettingInfo(
                name=key,
                value=_display(value),
                source=_source_of(key, yaml_values, env_values),
            )
            for key, value in settings.model_dump().items()
        ],
    )
