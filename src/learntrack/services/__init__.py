"""Domain services - Orchestrate allocator, stores and cross-entity rules."""

from learntrack.services.base import EntityService, StatusAwareService
from learntrack.services.course import CourseService
from learntrack.services.enrollment import EnrollmentService
from learntrack.services.student import StudentService
from learntrack.services.trainer import TrainerService

__all__ = [
    "CourseService",
    "EnrollmentService",
    "EntityService",
    "StatusAwareService",
    "StudentService",
    "TrainerService",
]
