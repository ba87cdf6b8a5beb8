"""Configuration loader for varspec."""

from __future__ import annotations

import logging
import tomllib
from typing import TYPE_CHECKING, Literal

import tomlkit
from pydantic import BaseModel, Field, model_validator

from varspec.atomic import atomic_write
from varspec.constants import (
    DEFAULT_FILE_MODE,
    DEFAULT_HANGING_INDENT,
    DEFAULT_WRAP_WIDTH,
)
from varspec.layout import wrap_lines
from varspec.paths import get_config_path

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

log = logging.getLogger(__name__)

# Width of the comment lines written at the top of each table
_COMMENT_WIDTH = 68


class LayoutConfig(BaseModel):
    """Text layout settings for help output and generated comments."""

    width: int = Field(
        default=DEFAULT_WRAP_WIDTH,
        ge=1,
        description="Column width used to wrap comments and terminal messages",
    )
    hanging_indent: int = Field(
        default=DEFAULT_HANGING_INDENT,
        ge=0,
        description="Indent applied to continuation lines of hanging layouts",
    )

    @model_validator(mode="after")
    def _indent_fits_width(self) -> LayoutConfig:
        if self.hanging_indent >= self.width:
            msg = (
                f"hanging_indent ({self.hanging_indent}) must be smaller than "
                f"width ({self.width})"
            )
            raise ValueError(msg)
        return self


class InitConfig(BaseModel):
    """Settings for `varspec init`."""

    default_format: Literal["hcl", "json"] = Field(
        default="hcl",
        description="Format written when neither --json nor a format is requested",
    )
    file_mode: int = Field(
        default=DEFAULT_FILE_MODE,
        ge=0,
        le=0o777,
        description="Permission bits applied to newly created specification files",
    )
    quiet: bool = Field(default=False, description="Suppress non-error output by default")


_TABLE_DESCRIPTIONS = {
    "layout": (
        "Layout settings control how help text and the comments embedded in "
        "generated specification files are wrapped."
    ),
    "init": "Defaults for creating example secure variable specification files.",
}


class VarspecConfig(BaseModel):
    """Root configuration model."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    init: InitConfig = Field(default_factory=InitConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> VarspecConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if config_path.exists():
            log.debug("Loading config from %s", config_path)
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)

        log.debug("No config at %s, using defaults", config_path)
        return cls()

    def iter_settings(self) -> Iterator[tuple[str, object, str]]:
        """Yield ``(dotted_key, value, description)`` for every setting."""
        for table_name in type(self).model_fields:
            table = getattr(self, table_name)
            for key, field in type(table).model_fields.items():
                yield f"{table_name}.{key}", getattr(table, key), field.description or ""

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()
        for table_name in type(self).model_fields:
            table = tomlkit.table()
            for line in wrap_lines(_TABLE_DESCRIPTIONS.get(table_name, ""), _COMMENT_WIDTH):
                table.add(tomlkit.comment(line))
            for key, value in getattr(self, table_name).model_dump().items():
                if value is not None:
                    table[key] = value
            doc[table_name] = table

        content = tomlkit.dumps(doc)
        atomic_write(path, content)
        log.debug("Wrote config to %s", path)
