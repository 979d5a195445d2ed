"""Snapshot tests for CLI help output."""
import pytest
from typer.testing import CliRunner

from speedy.cli import app

runner = CliRunner()


class TestMainHelp:
    """Test main CLI help output."""

    def test_main_help(self):
        """Main help shows the quick start and all commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        output = result.stdout

        assert "Scaffold a Vite/React frontend and a Bun/Express backend" in output
        for command in ("setup", "quick", "doctor", "version"):
            assert command in output

    def test_setup_help(self):
        result = runner.invoke(app, ["setup", "--help"])

        assert result.exit_code == 0
        assert "setup" in result.stdout
        assert "--output-dir" in result.stdout


class TestHelpStability:
    """Test that help output is stable and doesn't crash."""

    @pytest.mark.parametrize("command", [
        ["--help"],
        ["setup", "--help"],
        ["quick", "--help"],
        ["doctor", "--help"],
        ["version", "--help"],
    ])
    def test_help_does_not_crash(self, command):
        result = runner.invoke(app, command)

        assert result.exit_code == 0
        assert len(result.stdout) > 0
        assert "Traceback" not in result.stdout
