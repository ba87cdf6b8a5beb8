"""Atomic file writing utilities."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def _masked(mode: int) -> int:
    """Return ``mode`` with the process umask applied, as ``open(2)`` would."""
    umask = os.umask(0)
    os.umask(umask)
    return mode & ~umask


def _write_temp(directory: Path, content: str, mode: int | None) -> Path:
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp_")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        if mode is not None:
            os.chmod(tmp_path, _masked(mode))
    except Exception:
        Path(tmp_path).unlink(missing_ok=True)
        raise
    return Path(tmp_path)


def atomic_write(path: Path, content: str, *, mode: int | None = None) -> None:
    """Write file atomically to avoid partial/corrupt writes.

    When ``mode`` is given the permission bits, reduced by the umask, are
    applied to the temporary file before it replaces ``path``.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = _write_temp(path.parent, content, mode)
    try:
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


def write_new_file(path: Path, content: str, *, mode: int) -> None:
    """Atomically create ``path``, refusing to overwrite an existing file.

    The parent directory must already exist. The finished file is hard-linked
    into place, so a file created concurrently at ``path`` is never replaced.

    Raises:
        FileExistsError: If ``path`` already exists.
        OSError: If the file cannot be checked or written.
    """
    tmp_path = _write_temp(path.parent, content, mode)
    try:
        os.link(tmp_path, path)
    except FileExistsError as error:
        msg = f'File "{path}" already exists'
        raise FileExistsError(msg) from error
    finally:
        tmp_path.unlink(missing_ok=True)
