"""LearnTrack application - wires the allocator, stores and services together."""

from __future__ import annotations

from dataclasses import dataclass

from learntrack.config import Settings
from learntrack.domain import Course, Enrollment, Student, Trainer
from learntrack.id_allocator import CapacityListener, IdAllocator
from learntrack.repository import EntityStore
from learntrack.services import (
    CourseService,
    EnrollmentService,
    StudentService,
    TrainerService,
)


@dataclass
class LearnTrack:
    """One fully wired LearnTrack instance.

    The allocator is shared by every service; each store is owned by exactly
    one service.
    """

    allocator: IdAllocator
    students: StudentService
    courses: CourseService
    trainers: TrainerService
    enrollments: EnrollmentService

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        on_capacity_warning: CapacityListener | None = None,
    ) -> LearnTrack:
        """Build the allocator, stores and services.

        Args:
            settings: Settings to use. Defaults to the built-in ranges.
            on_capacity_warning: Optional listener for allocator capacity warnings.

        Returns:
            A ready-to-use LearnTrack.
        """
        if settings is None:
            settings = Settings()

        allocator = IdAllocator(
            ranges=settings.id_ranges,
            warning_threshold=settings.warning_threshold,
            on_capacity_warning=on_capacity_warning,
        )
        student_store = EntityStore(Student)
        course_store = EntityStore(Course)

        return cls(
            allocator=allocator,
            students=StudentService(student_store, allocator),
            courses=CourseService(course_store, allocator),
            trainers=TrainerService(EntityStore(Trainer), allocator),
            enrollments=EnrollmentService(
                EntityStore(Enrollment),
                allocator,
                students=student_store,
                courses=course_store,
            ),
        )
