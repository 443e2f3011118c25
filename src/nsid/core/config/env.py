"""
Seeding of NSID_* settings from .env files.

Files are applied in order, later files winning over earlier ones:

    1. ~/.config/nsid/.env (or $XDG_CONFIG_HOME/nsid/.env)
    2. <project>/.env
    3. <project>/.env.local

A variable already present in the process environment before loading is
never replaced.
"""

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)


def default_env_paths(project_dir: Path | None = None) -> list[Path]:
    """User .env first, then the project's .env and .env.local."""
    if project_dir is None:
        project_dir = Path.cwd()
    return [
        get_xdg_config_home() / "nsid" / ".env",
        project_dir / ".env",
        project_dir / ".env.local",
    ]


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> list[str]:
    """
    Copy variables from .env files into os.environ.

    Args:
        project_dir: Directory holding the project .env files (defaults to cwd)
        user_env_paths: Replaces the user .env location
        project_env_paths: Replaces the project .env locations

    Returns:
        Sorted names of the variables that were set
    """
    defaults = default_env_paths(project_dir)
    paths = [
        *(defaults[:1] if user_env_paths is None else user_env_paths),
        *(defaults[1:] if project_env_paths is None else project_env_paths),
    ]

    protected = set(os.environ)
    merged: dict[str, str] = {}
    for path in map(Path, paths):
        if not path.is_file():
            continue
        for key, value in dotenv_values(path).items():
            if value is not None and key not in protected:
                merged[key] = value

    os.environ.update(merged)
    if merged:
        logger.debug(f"Loaded {len(merged)} variable(s) from .env files")
    return sorted(merged)
