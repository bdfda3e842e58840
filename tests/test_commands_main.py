"""Tests for top-level CLI main() dispatch and error/abort handling."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import click
import pytest

from civix_generator.cli import commands


class TestCommandsMainDispatch:
    def test_no_arguments_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["civix"]):
            assert commands.main() == 0

        out = capsys.readouterr().out
        assert "generate:test" in out

    def test_help_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["civix", "help"]):
            assert commands.main() == 0

        assert "Add a new PHPUnit test" in capsys.readouterr().out

    def test_generate_test_is_passed_through(self, ext_dir: Path) -> None:
        with patch("sys.argv", ["civix", "generate:test", "CRM_Foo_BarTest", "--template", "e2e"]):
            assert commands.main() == 0

        test_file = ext_dir / "tests" / "phpunit" / "CRM" / "Foo" / "BarTest.php"
        assert "@group e2e" in test_file.read_text()

    def test_generate_test_failure_exit_code(self, ext_dir: Path) -> None:
        with patch("sys.argv", ["civix", "generate:test", "FooBar"]):
            assert commands.main() == 1

    def test_unknown_command(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("sys.argv", ["civix", "generate:nope"]):
            result = commands.main()

        assert result == 2
        assert "No such command" in capsys.readouterr().err

    def test_execute_command_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert commands.execute_command("generate:nope", []) == 1
        assert "Unknown command: generate:nope" in capsys.readouterr().out


class TestCommandsMainAbortHandling:
    """Ensure Ctrl-C style aborts produce friendly output without traceback."""

    def test_main_handles_click_abort_with_friendly_message(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """click.Abort should return 130 and print a friendly cancellation message."""
        with patch(
            "sys.argv",
            ["civix", "generate:test", "CRM_Foo_BarTest"],
        ), patch.object(
            commands._click_cli,
            "main",
            side_effect=click.Abort(),
        ):
            result = commands.main()

        assert result == 130
        output = capsys.readouterr().out
        assert "Cancelled by user" in output

    def test_main_handles_click_exception(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        exc = click.ClickException("boom")
        with patch(
            "sys.argv",
            ["civix", "generate:test", "CRM_Foo_BarTest"],
        ), patch.object(
            commands._click_cli,
            "main",
            side_effect=exc,
        ):
            result = commands.main()

        assert result == 1
        assert "boom" in capsys.readouterr().err
