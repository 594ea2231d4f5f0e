"""Domain model - Students, trainers, courses and enrollments."""

from learntrack.domain.exceptions import DomainError, InvalidStateError, ValidationError
from learntrack.domain.models import (
    Course,
    Enrollment,
    EnrollmentStatus,
    Person,
    Student,
    Trainer,
)

__all__ = [
    "Course",
    "DomainError",
    "Enrollment",
    "EnrollmentStatus",
    "InvalidStateError",
    "Person",
    "Student",
    "Trainer",
    "ValidationError",
]
