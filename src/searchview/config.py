"""Settings loading for applications built on searchview.

The library itself only takes a ``Settings`` object. This module is the
application-side glue used by the CLI: it locates a ``searchview.yaml``,
reads ``SEARCHVIEW_*`` environment variables (optionally seeded from a
``.env`` file) and merges everything into one ``Settings``.

Precedence, highest first: environment, the YAML ``settings:`` section,
a layout preset, model defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

if TYPE_CHECKING:
    from searchview.settings import Settings

logger = logging.getLogger(__name__)

CONFIG_FILES = ["searchview.yaml", "searchview.yml", ".searchviewrc"]
ENV_PREFIX = "SEARCHVIEW_"
MAX_SEARCH_DEPTH = 10

INT_SETTINGS = ("margin", "line_height", "header_height", "padding", "collapse_threshold")
STR_SETTINGS = ("local_repo_prefix", "directory_separator", "preset")

VALID_SETTINGS_KEYS = frozenset(INT_SETTINGS + STR_SETTINGS)


def load_env_file(env_path: str | Path = ".env") -> None:
    """Export ``KEY=VALUE`` lines of a dotenv file into ``os.environ``.

    Blank lines and ``#`` comments are skipped, surrounding quotes are
    removed from values, and variables that are already set keep their
    value. A missing file is not an error.
    """
    path = Path(env_path)
    if not path.is_file():
        return

    for raw in path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        key, _, value = entry.partition("=")
        os.environ.setdefault(key.strip(), value.strip().strip("\"'"))


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Look for a config file in ``start_dir`` (default: cwd) and its parents.

    At most ``MAX_SEARCH_DEPTH`` directories are examined. Within one
    directory the names in ``CONFIG_FILES`` are tried in order.
    """
    start = start_dir or Path.cwd()
    for directory in [start, *start.parents][:MAX_SEARCH_DEPTH]:
        candidate = next(
            (directory / name for name in CONFIG_FILES if (directory / name).exists()),
            None,
        )
        if candidate is not None:
            return candidate
    return None


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Report keys searchview does not understand.

    Unknown keys are not fatal; they are returned as human-readable warnings.
    """
    source = str(config_path) if config_path else "config"
    problems: list[str] = []

    extra_root = sorted(set(config) - {"settings"})
    if extra_root:
        problems.append(f"Unknown config keys in {source}: {', '.join(extra_root)}")

    section = config.get("settings")
    if section is None:
        return problems
    if not isinstance(section, dict):
        problems.append(f"'settings' in {source} must be a mapping")
        return problems

    extra_settings = sorted(set(section) - VALID_SETTINGS_KEYS)
    if extra_settings:
        problems.append(f"Unknown settings keys: {', '.join(extra_settings)}")
    return problems


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Read the YAML config at ``config_path``, or the discovered one.

    Returns an empty dict when there is no config file or its top level is
    not a mapping. Validation problems are logged, not raised.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None or not path.exists():
        return {}

    document = yaml.safe_load(path.read_text(encoding="utf-8"))
    if document is None:
        return {}
    if not isinstance(document, dict):
        logger.warning("Ignoring config file %s: top level is not a mapping", path)
        return {}

    for problem in validate_config(document, path):
        logger.warning(problem)
    return document


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Collect the ``SEARCHVIEW_*`` variables that are actually set.

    Unset variables are left out so lower-precedence sources still apply.
    An empty ``SEARCHVIEW_PRESET`` counts as unset, and an empty directory
    separator falls back to ``/``.
    """
    found: dict[str, Any] = {}

    for key in INT_SETTINGS:
        value = _env_int(ENV_PREFIX + key.upper())
        if value is not None:
            found[key] = value

    for key in STR_SETTINGS:
        name = ENV_PREFIX + key.upper()
        if name not in os.environ:
            continue
        value = os.environ[name]
        if key == "preset" and not value:
            continue
        if key == "directory_separator" and not value:
            value = "/"
        found[key] = value

    return found


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Return the recognised entries of the config's ``settings:`` section."""
    section = config.get("settings") or {}
    if not isinstance(section, dict):
        return {}
    return {key: value for key, value in section.items() if key in VALID_SETTINGS_KEYS}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Merge YAML and environment values into a ``Settings``.

    Args:
        config: Parsed YAML config (empty when None)
        env_settings: Environment overrides; read from ``os.environ`` when None

    Raises:
        ValueError: On an unknown preset or values ``Settings`` rejects
    """
    from searchview.settings import Settings

    if env_settings is None:
        env_settings = get_settings_from_env()
    values = get_settings_from_yaml(config or {})
    values.update(env_settings)

    preset = values.pop("preset", None)
    if preset:
        return Settings.with_preset(preset, **values)
    return Settings(**values)


def get_settings(config_path: Path | str | None = None) -> Settings:
    """Load config (file + env) and build the effective Settings."""
    return build_settings(load_config(config_path))
