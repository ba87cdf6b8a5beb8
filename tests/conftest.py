"""Pytest fixtures for varspec tests."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="varspec-tests-"))
os.environ["VARSPEC_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture(autouse=True)
def _clean_config_dir() -> Generator[None, None, None]:
    """Ensure config files written by one test don't leak into the next."""
    yield
    shutil.rmtree(Path(os.environ["VARSPEC_CONFIG_DIR"]), ignore_errors=True)


@pytest.fixture
def config_dir() -> Path:
    """The isolated config directory used for every test."""
    return Path(os.environ["VARSPEC_CONFIG_DIR"])


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def in_tmp_dir(runner: CliRunner, tmp_path: Path) -> Generator[Path, None, None]:
    """Run CLI commands from inside an empty temporary directory."""
    with runner.isolated_filesystem(temp_dir=tmp_path) as cwd:
        yield Path(cwd)


@pytest.fixture
def umask() -> Generator[Callable[[int], None], None, None]:
    """Set the process umask for one test, restoring the original afterwards."""
    original = os.umask(0o022)
    os.umask(original)

    def _set(value: int) -> None:
        os.umask(value)

    yield _set
    os.umask(original)
