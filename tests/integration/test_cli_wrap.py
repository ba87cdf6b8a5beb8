"""Tests for `varspec wrap`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from varspec.cli.commands.root import cli
from varspec.cli.commands.wrap import wrap_cmd

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import CliRunner

pytestmark = pytest.mark.integration


class TestWrapCommand:
    """Tests for wrapping text from the shell."""

    def test_wraps_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "the quick brown fox", "-w", "10"])

        assert result.exit_code == 0
        assert result.output == "the quick\nbrown fox\n"

    def test_prefix(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "alpha beta gamma", "-w", "6", "-p", "> "])

        assert result.exit_code == 0
        assert result.output == "> alpha\n> beta\n> gamma\n"

    def test_hanging_indent(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "one two three four five", "-w", "10", "-i", "4"])

        assert result.exit_code == 0
        assert result.output == "one two\n    three\n    four\n    five\n"

    def test_hang_uses_configured_indent(self, runner: CliRunner, config_dir: Path) -> None:
        config_dir.mkdir(parents=True, exist_ok=True)
        (config_dir / "config.toml").write_text(
            "[layout]\nwidth = 10\nhanging_indent = 2\n", encoding="utf-8"
        )

        result = runner.invoke(cli, ["wrap", "one two three four five", "--hang"])

        assert result.exit_code == 0
        assert result.output == "one two\n  three\n  four\n  five\n"

    def test_reads_stdin(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "-w", "10"], input="  the\tquick\n brown   fox\n")

        assert result.exit_code == 0
        assert result.output == "the quick\nbrown fox\n"

    def test_reads_file(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("alpha beta gamma", encoding="utf-8")

        result = runner.invoke(cli, ["wrap", "-f", str(source), "-w", "6"])

        assert result.exit_code == 0
        assert result.output == "alpha\nbeta\ngamma\n"

    def test_paragraphs_kept_apart(self, runner: CliRunner) -> None:
        text = "first paragraph\nhere\n\n\n  second one\n"

        result = runner.invoke(cli, ["wrap", "-w", "40", "-p", "# "], input=text)

        assert result.exit_code == 0
        assert result.output == "# first paragraph here\n\n# second one\n"

    def test_overlong_token_kept_whole(self, runner: CliRunner) -> None:
        word = "supercalifragilisticexpialidocious"
        result = runner.invoke(cli, ["wrap", word, "-w", "10"])

        assert result.exit_code == 0
        assert result.output == f"{word}\n"

    def test_default_width_from_config(self, runner: CliRunner) -> None:
        text = " ".join(["word"] * 30)
        result = runner.invoke(cli, ["wrap", text])

        assert result.exit_code == 0
        assert all(len(line) <= 70 for line in result.output.splitlines())
        assert len(result.output.splitlines()) == 3

    def test_runs_without_root_group(self, runner: CliRunner) -> None:
        result = runner.invoke(wrap_cmd, ["a b c", "-w", "3"])

        assert result.exit_code == 0
        assert result.output == "a b\nc\n"

    @pytest.mark.parametrize("width", ["0", "-5"])
    def test_rejects_non_positive_width(self, runner: CliRunner, width: str) -> None:
        result = runner.invoke(cli, ["wrap", "text", "-w", width])

        assert result.exit_code == 2

    def test_rejects_indent_not_smaller_than_width(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "one two three", "-w", "4", "-i", "4"])

        assert result.exit_code == 2
        assert "must be smaller than width" in result.output

    def test_rejects_prefix_with_indent(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["wrap", "text", "-p", "# ", "-i", "2"])

        assert result.exit_code == 2
        assert "cannot be combined" in result.output

    def test_rejects_text_and_file(self, runner: CliRunner, tmp_path: Path) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("x", encoding="utf-8")

        result = runner.invoke(cli, ["wrap", "text", "-f", str(source)])

        assert result.exit_code == 2
        assert "not both" in result.output
