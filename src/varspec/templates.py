"""Example secure variable specification templates."""

from __future__ import annotations

import json
from typing import Literal

from varspec.constants import COMMENT_PREFIX, DEFAULT_WRAP_WIDTH
from varspec.layout import tidy, wrap_and_prefix

type TemplateFormat = Literal["hcl", "json"]

MSG_WARN_KEYS = """
    REMINDER: While keys in the 'Items' collection can contain dots, using
    them in templates is easier when they do not. As a best practice, avoid
    dotted keys when possible."""

_PATH_COMMENT = """
    A secure variable Path can be specified in the specification file
    and will be used when writing the variable without specifying a
    Path in the command or when writing JSON directly to the `/var/`
    HTTP API endpoint"""

_NAMESPACE_COMMENT = """
    The Namespace to write the variable can be included in the specification
    and is the highest precedence way to set the namespace value."""

_ITEMS_COMMENT = """
    The Items collection is the only strictly required part of a secure
    variable specification. It contains the sensitive material to encrypt
    and store as a secure variable. The entire Items collection are
    encrypted and decrypted as a single unit."""

EXAMPLE_PATH = "path/to/variable"
EXAMPLE_NAMESPACE = "default"
EXAMPLE_ITEMS: dict[str, str] = {"key1": "value 1", "key2": "value 2"}


def comment_block(raw: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Render a hard-wrapped paragraph as a ``#`` comment block."""
    return wrap_and_prefix(tidy(raw), width, COMMENT_PREFIX)


def warn_keys_message(width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Reminder about dotted item keys, wrapped for terminal output."""
    return wrap_and_prefix(tidy(MSG_WARN_KEYS), width, "")


def render_hcl_spec(width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Render the HCL example specification with comments wrapped at ``width``."""
    items = "\n".join(f'  {key} = "{value}"' for key, value in EXAMPLE_ITEMS.items())
    sections = [
        f'{comment_block(_PATH_COMMENT, width)}\nPath = "{EXAMPLE_PATH}"',
        f'{comment_block(_NAMESPACE_COMMENT, width)}\nNamespace = "{EXAMPLE_NAMESPACE}"',
        comment_block(_ITEMS_COMMENT, width),
        f"{comment_block(MSG_WARN_KEYS, width)}\nItems {{\n{items}\n}}",
    ]
    return "\n\n".join(sections) + "\n"


def render_json_spec() -> str:
    """Render the JSON example specification."""
    return json.dumps({"Items": EXAMPLE_ITEMS}, indent=2) + "\n"


def render_spec(fmt: TemplateFormat, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Render the example specification in the requested format."""
    if fmt == "json":
        return render_json_spec()
    if fmt == "hcl":
        return render_hcl_spec(width)
    msg = f"Unknown template format: {fmt}"
    raise ValueError(msg)
