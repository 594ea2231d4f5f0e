"""Shared pytest fixtures and configuration."""

import logging

import pytest

from learntrack.app import LearnTrack
from learntrack.domain import Course, Student
from learntrack.id_allocator import IdAllocator


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")


# Shared fixtures


@pytest.fixture
def allocator() -> IdAllocator:
    """Create an allocator with the default ranges."""
    return IdAllocator()


@pytest.fixture
def track() -> LearnTrack:
    """Create a fully wired LearnTrack with default settings."""
    return LearnTrack.create()


@pytest.fixture
def make_student():
    """Factory for valid students with overridable fields."""

    def _make(**overrides: object) -> Student:
        fields: dict[str, object] = {
            "id": 1000,
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@example.com",
            "batch": "2024-A",
        }
        fields.update(overrides)
        return Student(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def make_course():
    """Factory for valid courses with overridable fields."""

    def _make(**overrides: object) -> Course:
        fields: dict[str, object] = {
            "id": 2000,
            "name": "Python Fundamentals",
            "description": "Core Python for new developers",
            "duration_weeks": 12,
        }
        fields.update(overrides)
        return Course(**fields)  # type: ignore[arg-type]

    return _make


@pytest.fixture(autouse=True)
def reset_learntrack_logger():
    """Detach handlers added by setup_logging so tests don't leak file handles."""
    yield
    logger = logging.getLogger("learntrack")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
