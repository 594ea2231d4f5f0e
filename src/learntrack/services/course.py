"""Course service."""

from __future__ import annotations

from typing import Any

from learntrack.domain import Course
from learntrack.id_allocator import EntityKind
from learntrack.services.base import StatusAwareService


class CourseService(StatusAwareService[Course]):
    """Creates and manages courses."""

    kind = EntityKind.COURSE

    def create_course(self, name: str, description: str, duration_weeks: int) -> Course:
        """Create a new active course.

        Args:
            name: Course name.
            description: Course description.
            duration_weeks: Length of the course, in weeks.

        Returns:
            The stored Course with an ID from the course range.

        Raises:
            ValidationError: If any field is malformed.
            RangeExhaustedError: If no course IDs are left.
        """
        return self._create(
            name=name,
            description=description,
            duration_weeks=duration_weeks,
        )

    def update_course(self, course_id: int, **changes: Any) -> Course:
        """Replace a course with a copy that has the given fields changed.

        Raises:
            EntityNotFoundError: If the course doesn't exist.
            ValidationError: If a changed field is malformed.
        """
        return self._replace(course_id, changes)

    def activate_course(self, course_id: int) -> Course:
        return self.activate(course_id)

    def deactivate_course(self, course_id: int) -> Course:
        return self.deactivate(course_id)

    def find_by_name_containing(self, text: str) -> list[Course]:
        """Get courses whose name contains some text, ignoring case."""
        wanted = text.casefold()
        return self.store.filter(lambda c: wanted in c.name.casefold())

    def find_by_duration_range(self, min_weeks: int, max_weeks: int) -> list[Course]:
        """Get courses lasting between min_weeks and max_weeks, inclusive."""
        return self.store.filter(lambda c: min_weeks <= c.duration_weeks <= max_weeks)
