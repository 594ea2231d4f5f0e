"""Enrollment service - enrolls students in courses."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from learntrack.domain import Enrollment, EnrollmentStatus, InvalidStateError
from learntrack.id_allocator import EntityKind
from learntrack.repository import EntityNotFoundError
from learntrack.services.base import EntityService

if TYPE_CHECKING:
    from learntrack.domain import Course, Student
    from learntrack.id_allocator import IdAllocator
    from learntrack.repository import EntityStore


class EnrollmentService(EntityService[Enrollment]):
    """Coordinates students, courses and enrollments.

    Reads from the student and course stores, writes only to the enrollment
    store. Status changes are unrestricted: any status may follow any other.
    """

    kind = EntityKind.ENROLLMENT

    def __init__(
        self,
        store: EntityStore[Enrollment],
        allocator: IdAllocator,
        students: EntityStore[Student],
        courses: EntityStore[Course],
    ) -> None:
        """Initialize the enrollment service.

        Args:
            store: Store owning enrollments.
            allocator: Shared identifier allocator.
            students: Student store, read for validation.
            courses: Course store, read for validation.
        """
        super().__init__(store, allocator)
        self.students = students
        self.courses = courses

    def enroll(self, student_id: int, course_id: int) -> Enrollment:
        """Enroll a student in a course.

        Any existing enrollment for the same student and course blocks a new
        one, whatever its status.

        Args:
            student_id: The student's ID.
            course_id: The course's ID.

        Returns:
            The new enrollment, dated today with ACTIVE status.

        Raises:
            EntityNotFoundError: If the student or course doesn't exist.
            InvalidStateError: If the student or course is inactive, or the
                student is already enrolled in the course.
            RangeExhaustedError: If no enrollment IDs are left.
        """
        student = self.students.get_by_id(student_id)
        if not student.active:
            raise InvalidStateError(
                "inactive student", f"Cannot enroll inactive student. Student ID: {student_id}"
            )

        course = self.courses.get_by_id(course_id)
        if not course.active:
            raise InvalidStateError(
                "inactive course", f"Cannot enroll in inactive course. Course ID: {course_id}"
            )

        if self.is_enrolled(student_id, course_id):
            raise InvalidStateError(
                "already enrolled",
                f"Student {student_id} is already enrolled in course {course_id}",
            )

        return self._create(
            student_id=student_id,
            course_id=course_id,
            enrollment_date=date.today(),
            status=EnrollmentStatus.ACTIVE,
        )

    # --- Queries ---

    def find_by_student_and_course(self, student_id: int, course_id: int) -> Enrollment | None:
        """Get the first enrollment for a student/course pair, or None."""
        matches = self.store.filter(
            lambda e: e.student_id == student_id and e.course_id == course_id
        )
        return matches[0] if matches else None

    def is_enrolled(self, student_id: int, course_id: int) -> bool:
        """Check whether any enrollment exists for a student/course pair."""
        return self.find_by_student_and_course(student_id, course_id) is not None

    def enrollments_for_student(self, student_id: int) -> list[Enrollment]:
        """Get all enrollments of a student.

        Raises:
            EntityNotFoundError: If the student doesn't exist.
        """
        self._require(self.students, student_id)
        return self.store.filter(lambda e: e.student_id == student_id)

    def enrollments_for_course(self, course_id: int) -> list[Enrollment]:
        """Get all enrollments in a course.

        Raises:
            EntityNotFoundError: If the course doesn't exist.
        """
        self._require(self.courses, course_id)
        return self.store.filter(lambda e: e.course_id == course_id)

    def active_enrollments_for_student(self, student_id: int) -> list[Enrollment]:
        return self.store.filter(lambda e: e.student_id == student_id and e.is_active)

    def active_enrollments_for_course(self, course_id: int) -> list[Enrollment]:
        return self.store.filter(lambda e: e.course_id == course_id and e.is_active)

    def enrollments_by_status(self, status: EnrollmentStatus) -> list[Enrollment]:
        return self.store.filter(lambda e: e.status == status)

    def count_by_status(self, status: EnrollmentStatus) -> int:
        return self.store.count_where(lambda e: e.status == status)

    # --- Status changes ---

    def update_status(self, enrollment_id: int, status: EnrollmentStatus) -> Enrollment:
        """Set an enrollment's status.

        Raises:
            EntityNotFoundError: If the enrollment doesn't exist.
            ValidationError: If the status is not a known EnrollmentStatus.
        """
        return self._replace(enrollment_id, {"status": status})

    def complete(self, enrollment_id: int) -> Enrollment:
        return self.update_status(enrollment_id, EnrollmentStatus.COMPLETED)

    def cancel(self, enrollment_id: int) -> Enrollment:
        return self.update_status(enrollment_id, EnrollmentStatus.CANCELLED)

    @staticmethod
    def _require(store: EntityStore[Student] | EntityStore[Course], entity_id: int) -> None:
        if not store.exists(entity_id):
            raise EntityNotFoundError(store.kind_name, entity_id)
