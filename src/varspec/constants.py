"""Default file names and layout widths."""

from __future__ import annotations

# Default name used when initializing the example spec file in HCL format
DEFAULT_HCL_SPEC_NAME = "spec.nsv.hcl"

# Default name used when initializing the example spec file in JSON format
DEFAULT_JSON_SPEC_NAME = "spec.nsv.json"

DEFAULT_WRAP_WIDTH = 70
DEFAULT_HANGING_INDENT = 4
DEFAULT_FILE_MODE = 0o660

COMMENT_PREFIX = "# "

CONFIG_FILE_NAME = "config.toml"
