"""Tests for doctor and version commands."""
from types import SimpleNamespace

from typer.testing import CliRunner

from speedy import __version__
from speedy.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_doctor_all_tools_present(monkeypatch):
    def fake_run(args, capture_output=False, text=False):
        return SimpleNamespace(returncode=0, stdout=f"{args[0]} 1.2.3\n", stderr="")

    monkeypatch.setattr("speedy.cli_utility_commands.subprocess.run", fake_run)

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 0, result.output
    assert "bun 1.2.3" in result.output


def test_doctor_missing_runner(monkeypatch):
    def fake_run(args, capture_output=False, text=False):
        if args[0] == "bun":
            raise FileNotFoundError(args[0])
        return SimpleNamespace(returncode=0, stdout="ok\n", stderr="")

    monkeypatch.setattr("speedy.cli_utility_commands.subprocess.run", fake_run)

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_doctor_missing_docker_is_not_fatal(monkeypatch):
    def fake_run(args, capture_output=False, text=False):
        if args[0] == "docker":
            raise FileNotFoundError(args[0])
        return SimpleNamespace(returncode=0, stdout="ok\n", stderr="")

    monkeypatch.setattr("speedy.cli_utility_commands.subprocess.run", fake_run)

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 0, result.output


def test_doctor_reports_bad_config(tmp_path, monkeypatch):
    from speedy.core.config import set_config

    config_file = tmp_path / "config.yml"
    config_file.write_text("package_runner: bun\ntimeout: 5\n")
    monkeypatch.setenv("SPEEDY_CONFIG", str(config_file))
    set_config(None)

    result = runner.invoke(app, ["doctor"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in result.output
    assert "timeout" in result.output
