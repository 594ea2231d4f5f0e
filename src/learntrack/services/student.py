"""Student service."""

from __future__ import annotations

from typing import Any

from learntrack.domain import Student
from learntrack.id_allocator import EntityKind
from learntrack.services.base import StatusAwareService


class StudentService(StatusAwareService[Student]):
    """Creates and manages students."""

    kind = EntityKind.STUDENT

    def create_student(
        self,
        first_name: str,
        last_name: str,
        batch: str,
        email: str | None = None,
    ) -> Student:
        """Create a new active student.

        Args:
            first_name: Student's first name.
            last_name: Student's last name.
            batch: Batch label, e.g. "2024-A".
            email: Optional email address.

        Returns:
            The stored Student with an ID from the student range.

        Raises:
            ValidationError: If any field is malformed.
            RangeExhaustedError: If no student IDs are left.
        """
        return self._create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            batch=batch,
        )

    def update_student(self, student_id: int, **changes: Any) -> Student:
        """Replace a student with a copy that has the given fields changed.

        Raises:
            EntityNotFoundError: If the student doesn't exist.
            ValidationError: If a changed field is malformed.
        """
        return self._replace(student_id, changes)

    def activate_student(self, student_id: int) -> Student:
        return self.activate(student_id)

    def deactivate_student(self, student_id: int) -> Student:
        return self.deactivate(student_id)

    def find_by_batch(self, batch: str) -> list[Student]:
        """Get students in a batch, ignoring case."""
        wanted = batch.casefold()
        return self.store.filter(lambda s: s.batch.casefold() == wanted)

    def find_by_email(self, email: str) -> list[Student]:
        """Get students with an email address, ignoring case."""
        wanted = email.casefold()
        return self.store.filter(lambda s: s.email is not None and s.email.casefold() == wanted)
