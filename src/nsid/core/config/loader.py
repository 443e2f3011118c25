"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import ID_TYPE_NAMES, LOG_LEVELS, OUTPUT_FORMATS, NsidConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per process
_config_cache: NsidConfig | None = None

# Env var → (config key, allowed values)
ENV_OVERRIDES: dict[str, tuple[str, tuple[str, ...]]] = {
    "NSID_DEFAULT_ID_TYPE": ("default_id_type", ID_TYPE_NAMES),
    "NSID_OUTPUT_FORMAT": ("output_format", OUTPUT_FORMATS),
    "NSID_LOG_LEVEL": ("log_level", LOG_LEVELS),
}


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """Path to ~/.config/nsid/config.json (or XDG equivalent)."""
    return get_xdg_config_home() / "nsid" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """Path to .nsid.json in the project directory (defaults to cwd)."""
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".nsid.json"


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to parse config at {path}: {e}")
        return None

    if isinstance(data, dict):
        return data
    logger.warning(f"Ignoring config at {path}: top level is not an object")
    return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        NSID_DEFAULT_ID_TYPE - overrides default_id_type
        NSID_OUTPUT_FORMAT - overrides output_format
        NSID_LOG_LEVEL - overrides log_level (case-insensitive)

    Values outside the allowed set are ignored with a warning.
    """
    result = config_dict.copy()

    for env_name, (key, allowed) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        value = raw.strip()
        if key == "log_level":
            value = value.upper()
        else:
            value = value.lower()
        if value not in allowed:
            logger.warning(f"Invalid {env_name} value '{raw}', ignoring")
            continue
        result[key] = value

    return result


def get_default_config() -> dict[str, Any]:
    """Hardcoded default configuration."""
    return {
        "default_id_type": "str",
        "output_format": "text",
        "log_level": "WARNING",
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> NsidConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (NSID_*)
        2. Project config (.nsid.json)
        3. User config (~/.config/nsid/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .nsid.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated NsidConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged.update(user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged.update(project_config)

    merged = apply_env_overrides(merged)

    config = NsidConfig(**merged)
    _config_cache = config
    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
