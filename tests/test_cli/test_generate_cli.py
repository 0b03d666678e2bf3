"""Tests for the planner command-line entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from planner_cli import generate
from planner_cli.generate import EXIT_INVALID_PROFILE, EXIT_PLAN_LIMIT, main


class TestGenerateCli:
    def test_flags_to_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([
            "--goal", "bulk", "--level", "beginner",
            "--equipment", "dumbbells", "--minutes", "45", "--format", "json",
        ])
        assert code == 0
        plan = json.loads(capsys.readouterr().out)
        assert plan["daysPerWeek"] == 4
        assert [e["id"] for e in plan["days"][0]["exercises"]] == ["ip", "pu", "hc", "oe"]

    def test_profile_file_to_table(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = tmp_path / "me.json"
        path.write_text(json.dumps({
            "goal": "maintain", "level": "intermediate",
            "equipment": [], "workoutMinutes": 30,
        }))
        code = main(["--profile", str(path), "--format", "table"])
        assert code == 0
        out = capsys.readouterr().out
        assert "Lower Body" in out
        assert "Push-Ups" in out

    def test_invalid_profile_exit_code(self) -> None:
        code = main(["--goal", "shred", "--level", "beginner", "--minutes", "30"])
        assert code == EXIT_INVALID_PROFILE

    def test_missing_profile_file(self, tmp_path: Path) -> None:
        assert main(["--profile", str(tmp_path / "none.json")]) == EXIT_INVALID_PROFILE

    def test_free_plan_limit(self) -> None:
        code = main([
            "--goal", "cut", "--level", "beginner", "--minutes", "30",
            "--existing-plans", "2",
        ])
        assert code == EXIT_PLAN_LIMIT

    def test_premium_skips_limit(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([
            "--goal", "cut", "--level", "beginner", "--minutes", "30",
            "--existing-plans", "9", "--premium", "--format", "json",
        ])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["goal"] == "cut"


class TestOutputFormatConfig:
    def test_config_format_used_as_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(generate, "OUTPUT_FORMAT", "Table")
        code = main(["--goal", "cut", "--level", "beginner", "--minutes", "30"])
        assert code == 0
        assert "Push-Ups" in capsys.readouterr().out

    def test_unknown_config_format_falls_back_to_json(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        monkeypatch.setattr(generate, "OUTPUT_FORMAT", "xml")
        with caplog.at_level(logging.WARNING, logger="planner_cli.generate"):
            code = main(["--goal", "cut", "--level", "beginner", "--minutes", "30"])
        assert code == 0
        assert json.loads(capsys.readouterr().out)["goal"] == "cut"
        assert "Unknown FITPLAN_OUTPUT_FORMAT 'xml'" in caplog.text
