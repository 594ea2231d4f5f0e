"""Unit tests for the learntrack CLI."""

from pathlib import Path
from textwrap import dedent

import pytest
from click.testing import CliRunner

from learntrack.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_config(directory: Path, content: str) -> Path:
    config_path = directory / "learntrack.yaml"
    config_path.write_text(dedent(content).strip())
    return config_path


@pytest.mark.unit
class TestRangesCommand:
    """Tests for the ranges command."""

    def test_default_ranges(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(main, ["ranges"])

        assert result.exit_code == 0
        assert "Student" in result.output
        assert "[1000-1999]" in result.output
        assert "[3000-3999]" in result.output
        assert "Capacity warnings start at 90% usage" in result.output

    def test_ranges_from_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            """
            id_ranges:
              trainer: {start: 5000, end: 5009}
            warning_threshold: 0.5
            """,
        )

        result = runner.invoke(main, ["ranges", "--config", str(config_path)])

        assert result.exit_code == 0
        assert "[5000-5009]" in result.output
        assert "50% usage" in result.output

    def test_config_discovered_from_cwd(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config(tmp_path, "id_ranges:\n  course: {start: 2000, end: 2004}")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(main, ["ranges"])

        assert result.exit_code == 0
        assert "[2000-2004]" in result.output

    def test_bad_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = write_config(tmp_path, "id_ranges:\n  mentor: {start: 1, end: 2}")

        result = runner.invoke(main, ["ranges", "-c", str(config_path)])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


@pytest.mark.unit
class TestDemoCommand:
    """Tests for the demo command."""

    def test_demo_success(
        self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(main, ["demo", "--students", "2"])

        assert result.exit_code == 0
        assert "[SUCCESS] Created course 2000: Python Fundamentals" in result.output
        assert result.output.count("[SUCCESS] Enrolled") == 2
        assert "enrollment 3001" in result.output
        assert "[WARNING]" not in result.output
        assert (tmp_path / "logs" / "learntrack.log").exists()

    def test_demo_reports_capacity_warning(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            f"""
            id_ranges:
              student: {{start: 1000, end: 1001}}
            logging:
              dir: {tmp_path / "logs"}
            """,
        )

        result = runner.invoke(main, ["demo", "-c", str(config_path), "--students", "2"])

        assert result.exit_code == 0
        assert "[WARNING] Student ID capacity at 100.0% - only 0 IDs remaining" in result.output

    def test_demo_range_exhausted(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            f"""
            id_ranges:
              enrollment: {{start: 3000, end: 3000}}
            logging:
              dir: {tmp_path / "logs"}
            """,
        )

        result = runner.invoke(main, ["demo", "-c", str(config_path), "--students", "2"])

        assert result.exit_code == 1
        assert "[ERROR]" in result.output
        assert "[3000-3000] is full" in result.output

    def test_demo_rejects_zero_students(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo", "--students", "0"])

        assert result.exit_code == 2
