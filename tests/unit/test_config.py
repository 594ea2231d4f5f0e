"""Unit tests for configuration loading."""

from pathlib import Path
from textwrap import dedent

import pytest

from learntrack.config import ConfigError, Settings, find_config, load_config
from learntrack.id_allocator import DEFAULT_RANGES, EntityKind, IdRange


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_content = dedent("""
        id_ranges:
          student:
            start: 10000
            end: 19999
          Course: {start: 20000, end: 20099}

        warning_threshold: 0.75

        logging:
          level: DEBUG
          dir: var/log
    """).strip()

    config_path = tmp_path / "learntrack.yaml"
    config_path.write_text(config_content)
    return config_path


def write_config(tmp_path: Path, content: str) -> Path:
    config_path = tmp_path / "learntrack.yaml"
    config_path.write_text(dedent(content).strip())
    return config_path


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_ranges(self, temp_config: Path) -> None:
        settings = load_config(temp_config)

        assert settings.id_ranges[EntityKind.STUDENT] == IdRange(10000, 19999)
        assert settings.id_ranges[EntityKind.COURSE] == IdRange(20000, 20099)

    def test_unlisted_kinds_keep_defaults(self, temp_config: Path) -> None:
        settings = load_config(temp_config)

        assert settings.id_ranges[EntityKind.TRAINER] == DEFAULT_RANGES[EntityKind.TRAINER]
        assert len(settings.id_ranges) == len(EntityKind)

    def test_load_threshold_and_logging(self, temp_config: Path) -> None:
        settings = load_config(temp_config)

        assert settings.warning_threshold == 0.75
        assert settings.logging.level == "DEBUG"
        assert settings.logging.dir == "var/log"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "learntrack.yaml"
        config_path.write_text("")

        settings = load_config(config_path)

        assert settings.id_ranges == DEFAULT_RANGES
        assert settings.warning_threshold == 0.9

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_path = write_config(tmp_path, "id_ranges: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        config_path = write_config(tmp_path, "- just\n- a list")

        with pytest.raises(ConfigError, match="must be a YAML mapping"):
            load_config(config_path)

    def test_unknown_kind(self, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            """
            id_ranges:
              mentor: {start: 5000, end: 5999}
            """,
        )

        with pytest.raises(ConfigError, match="Unknown entity kind 'mentor'"):
            load_config(config_path)

    def test_overlapping_ranges(self, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            """
            id_ranges:
              student: {start: 1000, end: 2500}
            """,
        )

        with pytest.raises(ConfigError, match="overlap"):
            load_config(config_path)

    @pytest.mark.parametrize(
        "bounds",
        ["{start: 1000}", "{start: 1999, end: 1000}", "{start: a, end: b}", "42"],
    )
    def test_malformed_range(self, tmp_path: Path, bounds: str) -> None:
        config_path = write_config(tmp_path, f"id_ranges:\n  student: {bounds}")

        with pytest.raises(ConfigError, match="student"):
            load_config(config_path)

    def test_logging_rotation_settings(self, tmp_path: Path) -> None:
        config_path = write_config(
            tmp_path,
            """
            logging:
              file: app.log
              max_bytes: 2048
              backup_count: 0
            """,
        )

        settings = load_config(config_path)

        assert settings.logging.file == "app.log"
        assert settings.logging.max_bytes == 2048
        assert settings.logging.backup_count == 0
        assert settings.logging.level == "INFO"

    @pytest.mark.parametrize("content", ["logging: [a, b]", "logging:\n  max_bytes: -1"])
    def test_bad_logging_section(self, tmp_path: Path, content: str) -> None:
        config_path = write_config(tmp_path, content)

        with pytest.raises(ConfigError, match="logging"):
            load_config(config_path)

    @pytest.mark.parametrize("threshold", ["0", "1.5", "high", "true"])
    def test_bad_threshold(self, tmp_path: Path, threshold: str) -> None:
        config_path = write_config(tmp_path, f"warning_threshold: {threshold}")

        with pytest.raises(ConfigError, match="warning_threshold"):
            load_config(config_path)


@pytest.mark.unit
class TestSettings:
    """Tests for Settings defaults."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.id_ranges == DEFAULT_RANGES
        assert settings.id_ranges is not DEFAULT_RANGES
        assert settings.logging.level == "INFO"


@pytest.mark.unit
class TestFindConfig:
    """Tests for find_config function."""

    def test_find_in_current_dir(self, temp_config: Path) -> None:
        assert find_config(temp_config.parent) == temp_config.resolve()

    def test_find_in_parent_dir(self, temp_config: Path) -> None:
        subdir = temp_config.parent / "a" / "b"
        subdir.mkdir(parents=True)

        assert find_config(subdir) == temp_config.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None
