"""XDG-compliant path helpers for varspec configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

from varspec.constants import CONFIG_FILE_NAME


def get_config_dir() -> Path:
    """Get the config directory for varspec (config.toml)."""
    override = os.environ.get("VARSPEC_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("varspec"))


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    return get_config_dir() / CONFIG_FILE_NAME
