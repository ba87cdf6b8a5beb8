"""Text layout helpers for help text and generated comments."""

from varspec.layout.wrap import (
    LayoutError,
    hanging_indent,
    prefix_lines,
    tidy,
    wrap,
    wrap_and_prefix,
    wrap_lines,
)

__all__ = [
    "LayoutError",
    "hanging_indent",
    "prefix_lines",
    "tidy",
    "wrap",
    "wrap_and_prefix",
    "wrap_lines",
]
