"""CLI entry point for LearnTrack."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from learntrack.app import LearnTrack
from learntrack.config import ConfigError, Settings, find_config, load_config
from learntrack.errors import LearnTrackError
from learntrack.id_allocator import CapacityWarning
from learntrack.logging import setup_logging_from_config

logger = logging.getLogger(__name__)


def _load_settings(config_path: Path | None) -> Settings:
    """Load settings from an explicit path, a discovered learntrack.yaml, or defaults."""
    if config_path is None:
        config_path = find_config()
    if config_path is None:
        return Settings()
    return load_config(config_path)


config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to learntrack.yaml (auto-detected if not specified)",
)


@click.group()
@click.version_option(package_name="learntrack")
def main() -> None:
    """LearnTrack - in-memory course management."""
    pass


@main.command()
@config_option
def ranges(config_path: Path | None) -> None:
    """Show the identifier range reserved for each entity kind."""
    try:
        settings = _load_settings(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    click.echo(f"{'Kind':<12} {'Range':<14} {'Capacity':>8}")
    for kind, id_range in settings.id_ranges.items():
        click.echo(f"{kind.label:<12} {str(id_range):<14} {id_range.capacity:>8}")
    click.echo(f"\nCapacity warnings start at {settings.warning_threshold:.0%} usage")


@main.command()
@config_option
@click.option(
    "--students",
    "num_students",
    type=click.IntRange(min=1),
    default=1,
    help="Number of sample students to create and enroll (default: 1)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
def demo(config_path: Path | None, num_students: int, verbose: bool) -> None:
    """Create sample students and a course, enroll them and show ID usage."""
    try:
        settings = _load_settings(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging_from_config(settings.logging, verbose=verbose)

    capacity_warnings: list[CapacityWarning] = []
    track = LearnTrack.create(settings, on_capacity_warning=capacity_warnings.append)

    try:
        course = track.courses.create_course(
            name="Python Fundamentals",
            description="Core Python for new developers",
            duration_weeks=12,
        )
        click.echo(f"[SUCCESS] Created course {course.id}: {course.name}")

        for number in range(1, num_students + 1):
            student = track.students.create_student(
                first_name="Sample",
                last_name=f"Student{number}",
                batch="2024-A",
            )
            enrollment = track.enrollments.enroll(student.id, course.id)
            logger.debug("Enrolled student %s as enrollment %s", student.id, enrollment.id)
            click.echo(
                f"[SUCCESS] Enrolled {student.display_name} "
                f"(enrollment {enrollment.id}, {enrollment.status}, {enrollment.enrollment_date})"
            )
    except LearnTrackError as e:
        logger.error("Demo failed (%s): %s", e.kind, e)
        click.echo(f"[ERROR] {e}", err=True)
        sys.exit(1)

    click.echo(f"\n{'Kind':<12} {'Issued':>6} {'Remaining':>10} {'Usage':>7}")
    for kind in track.allocator.kinds:
        usage = track.allocator.usage(kind)
        click.echo(
            f"{kind.label:<12} {usage.issued:>6} {usage.remaining:>10} {usage.usage:>7.1%}"
        )

    for warning in capacity_warnings[-1:]:
        click.echo(f"\n[WARNING] {warning}")


if __name__ == "__main__":
    main()
