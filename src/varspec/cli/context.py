"""Shared click context helpers."""

from __future__ import annotations

from pathlib import Path

import click

from varspec.config import VarspecConfig
from varspec.paths import get_config_path

CONFIG_PATH_KEY = "varspec.config_path"


def load_config(config_path: Path | None = None) -> VarspecConfig:
    """Load configuration, reporting invalid files as click errors."""
    try:
        return VarspecConfig.load(config_path)
    except (OSError, ValueError) as error:
        # ValidationError and TOMLDecodeError are both ValueErrors
        raise click.ClickException(f"Invalid configuration: {error}") from error


def get_config_file(ctx: click.Context) -> Path:
    """Return the config file selected with --config, or the default location."""
    return ctx.meta.get(CONFIG_PATH_KEY) or get_config_path()


def get_config(ctx: click.Context) -> VarspecConfig:
    """Return the config attached by the root group, loading it if missing."""
    config = ctx.find_object(VarspecConfig)
    if config is None:
        config = load_config(get_config_file(ctx))
        ctx.obj = config
    return config


__all__ = ["CONFIG_PATH_KEY", "get_config", "get_config_file", "load_config"]
