"""Whitespace-token word wrapping.

Pure helpers used to lay out help text and the comment blocks embedded in
generated specification files. Tokens are maximal runs of non-whitespace
characters and are never split; a token longer than the requested width is
placed alone on its own line.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

# Any run of whitespace, including tabs and newlines
WHITESPACE_RUN = re.compile(r"\s+")


class LayoutError(ValueError):
    """Raised when a width or indent violates the layout contract."""


def _check_width(width: int) -> None:
    if width <= 0:
        msg = f"width must be a positive integer, got {width}"
        raise LayoutError(msg)


def tidy(raw: str) -> str:
    """Collapse a wrapped and indented raw string into a single-spaced paragraph.

    Leading and trailing whitespace is trimmed and every run of tabs, newlines
    and spaces is replaced with a single space, so the result is suitable for
    rewrapping.

    Args:
        raw: Text that may contain arbitrary whitespace.

    Returns:
        Single-spaced, trimmed text.
    """
    if not raw:
        return ""
    return WHITESPACE_RUN.sub(" ", raw.strip())


def wrap_lines(text: str, width: int) -> list[str]:
    """Greedily pack whitespace-delimited tokens into lines of at most ``width``.

    Args:
        text: Input text; whitespace only separates tokens.
        width: Target column width, must be positive.

    Returns:
        Wrapped lines in token order. Empty or all-whitespace input yields an
        empty list.

    Raises:
        LayoutError: If ``width`` is not positive.
    """
    _check_width(width)

    lines: list[str] = []
    current: list[str] = []
    length = 0
    for token in text.split():
        if current and length + 1 + len(token) > width:
            lines.append(" ".join(current))
            current = []
            length = 0
        if current:
            length += 1
        current.append(token)
        length += len(token)
    if current:
        lines.append(" ".join(current))
    return lines


def wrap(text: str, width: int) -> str:
    """Word wrap ``text`` at ``width`` columns and return it newline-joined."""
    return "\n".join(wrap_lines(text, width))


def prefix_lines(lines: Sequence[str], prefix: str) -> list[str]:
    """Return a new list with ``prefix`` prepended to every line."""
    return [f"{prefix}{line}" for line in lines]


def wrap_and_prefix(text: str, width: int, prefix: str) -> str:
    """Word wrap ``text`` at ``width`` and prepend ``prefix`` to every line.

    The prefix is applied after wrapping, so each returned line is at most
    ``len(prefix) + width`` long unless it holds a single over-long token.
    """
    return "\n".join(prefix_lines(wrap_lines(text, width), prefix))


def hanging_indent(text: str, width: int, indent: int) -> str:
    """Wrap ``text`` so every line after the first is indented by ``indent``.

    The first line is wrapped as though the indent were not in play. The
    remaining text is rewrapped at ``width - indent`` and padded with spaces,
    so no indented line exceeds ``width`` unless it holds a single over-long
    token.

    Raises:
        LayoutError: If ``width`` is not positive, ``indent`` is negative, or
            ``indent`` leaves no room for text.
    """
    _check_width(width)
    if indent < 0:
        msg = f"indent must be non-negative, got {indent}"
        raise LayoutError(msg)
    if indent >= width:
        msg = f"indent {indent} must be smaller than width {width}"
        raise LayoutError(msg)

    lines = wrap_lines(text, width)
    if len(lines) <= 1:
        return "".join(lines)

    rest = wrap_lines(" ".join(lines[1:]), width - indent)
    return "\n".join([lines[0], *prefix_lines(rest, " " * indent)])


__all__ = [
    "WHITESPACE_RUN",
    "LayoutError",
    "hanging_indent",
    "prefix_lines",
    "tidy",
    "wrap",
    "wrap_and_prefix",
    "wrap_lines",
]
