"""varspec: scaffold example secure variable specifications."""

from varspec.layout import hanging_indent, tidy, wrap, wrap_and_prefix
from varspec.version import get_varspec_version

__version__ = get_varspec_version()

__all__ = ["hanging_indent", "tidy", "wrap", "wrap_and_prefix"]
