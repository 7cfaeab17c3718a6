"""Tests for the command line interface."""

import sys
from pathlib import Path

import pytest

from hevy_notes import cli
from hevy_notes.config import Settings
from hevy_notes.exceptions import ConfigurationError
from hevy_notes.metrics.units import WeightUnit


@pytest.fixture
def env_settings(monkeypatch):
    """Make the CLI start from clean settings instead of the environment."""
    base = Settings(_env_file=None, api_key="")
    monkeypatch.setattr(cli, "get_settings", lambda: base)
    return base


class TestParser:
    """Tests for argument parsing."""

    def test_sync_limit(self):
        args = cli.build_parser().parse_args(["sync", "--limit", "5"])
        assert args.command == "sync"
        assert args.limit == 5

    def test_global_options(self):
        args = cli.build_parser().parse_args(["--unit", "lbs", "--vault", "/tmp/v", "trend", "Bench Press"])
        assert args.unit == "lbs"
        assert args.vault == "/tmp/v"
        assert args.exercise == "Bench Press"

    def test_convert_requires_id(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["convert"])

    def test_every_command_has_handler(self):
        parser = cli.build_parser()
        for command in ("sync", "list", "weekly", "monthly", "exercises"):
            assert parser.parse_args([command]).command in cli.COMMANDS


class TestBuildSettings:
    def test_overrides(self, env_settings, tmp_path):
        args = cli.build_parser().parse_args(
            ["--vault", str(tmp_path), "--folder", "/Gym/", "--unit", "lbs", "weekly"]
        )
        settings = cli.build_settings(args)

        assert settings.vault_path == Path(tmp_path)
        assert settings.base_folder == "Gym"
        assert settings.weight_unit == WeightUnit.LBS

    def test_no_overrides(self, env_settings):
        args = cli.build_parser().parse_args(["weekly"])
        assert cli.build_settings(args) == env_settings

    def test_invalid_environment(self, monkeypatch):
        """Test that a bad HEVY_* value becomes a configuration error."""
        monkeypatch.setenv("HEVY_WEIGHT_UNIT", "stone")
        monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None))
        args = cli.build_parser().parse_args(["weekly"])

        with pytest.raises(ConfigurationError) as exc_info:
            cli.build_settings(args)

        assert "weight_unit" in exc_info.value.message
        assert exc_info.value.details == {"setting": "weight_unit"}


class TestMain:
    """Tests for the entry point."""

    def test_missing_api_key_exits(self, env_settings, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "argv", ["hevy-notes", "--vault", str(tmp_path), "sync"])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1

    def test_invalid_environment_exits(self, monkeypatch, capsys):
        monkeypatch.setenv("HEVY_DEFAULT_LIMIT", "0")
        monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None))
        monkeypatch.setattr(sys, "argv", ["hevy-notes", "weekly"])

        with pytest.raises(SystemExit) as exc_info:
            cli.main()

        assert exc_info.value.code == 1
        assert "default_limit" in capsys.readouterr().out

    def test_weekly_command(self, env_settings, monkeypatch, tmp_path):
        note = tmp_path / "HevyWorkouts" / "2024-03-05 - Push Day.md"
        note.parent.mkdir(parents=True)
        note.write_text("- Set 1: **100.0 kg** x 5\n", encoding="utf-8")
        monkeypatch.setattr(sys, "argv", ["hevy-notes", "--vault", str(tmp_path), "weekly"])

        cli.main()

        report = tmp_path / "HevyWorkouts" / "WeeklyReports" / "Report-2024-W10.md"
        assert "- Volume: 500.0 kg" in report.read_text(encoding="utf-8")

    def test_no_command_prints_help(self, env_settings, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["hevy-notes"])
        cli.main()
        assert "usage: hevy-notes" in capsys.readouterr().out
