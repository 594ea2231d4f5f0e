"""Domain entities: people, courses and enrollments.

Entities are pydantic models validated on construction and on every field
assignment. Failures surface as learntrack's own ValidationError, naming the
offending field.
"""

from datetime import date
from enum import StrEnum
from typing import Annotated, Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    PositiveInt,
    Strict,
    StrictBool,
    StringConstraints,
)
from pydantic import ValidationError as PydanticValidationError

from learntrack.domain.exceptions import ValidationError

# Minimal local@domain.tld shape
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Email = Annotated[str, StringConstraints(strip_whitespace=True, pattern=EMAIL_PATTERN)]
# Strict: bools and numeric strings are never identifiers or counts
EntityId = Annotated[PositiveInt, Strict()]
Count = Annotated[NonNegativeInt, Strict()]
Weeks = Annotated[PositiveInt, Strict()]


class EnrollmentStatus(StrEnum):
    """Enrollment status enum."""

    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class DomainModel(BaseModel):
    """Base for all entities: validated on construction and assignment."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    kind_name: ClassVar[str] = "Entity"

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            raise to_validation_error(type(self), e) from e

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as e:
            raise to_validation_error(type(self), e) from e

    @classmethod
    def field_label(cls, name: str) -> str:
        """Human-readable name of a field for error messages."""
        if name == "id":
            return f"{cls.kind_name} ID"
        field_info = cls.model_fields.get(name)
        if field_info is not None and field_info.title:
            return field_info.title
        return name.replace("_", " ").capitalize()


def to_validation_error(
    model: type[DomainModel], error: PydanticValidationError
) -> ValidationError:
    """Convert the first pydantic error into a learntrack ValidationError."""
    first = error.errors()[0]
    field = str(first["loc"][0]) if first["loc"] else model.kind_name
    return ValidationError(field, f"{model.field_label(field)}: {first['msg']}")


class Person(DomainModel):
    """A named individual with an optional email address."""

    kind_name: ClassVar[str] = "Person"

    id: EntityId
    first_name: NonBlankStr
    last_name: NonBlankStr
    email: Email | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def display_name(self) -> str:
        return self.full_name


class Student(Person):
    """A person attending courses, grouped into a batch."""

    kind_name: ClassVar[str] = "Student"

    batch: NonBlankStr
    active: StrictBool = True

    @property
    def display_name(self) -> str:
        return f"Student: {self.full_name} (Batch: {self.batch})"


class Trainer(Person):
    """A person teaching courses."""

    kind_name: ClassVar[str] = "Trainer"

    specialization: NonBlankStr
    years_of_experience: Count = 0

    @property
    def display_name(self) -> str:
        return f"Trainer: {self.full_name} (Specialization: {self.specialization})"


class Course(DomainModel):
    """A course students can enroll in."""

    kind_name: ClassVar[str] = "Course"

    id: EntityId
    name: NonBlankStr = Field(title="Course name")
    description: NonBlankStr
    duration_weeks: Weeks = Field(title="Duration in weeks")
    active: StrictBool = True


class Enrollment(DomainModel):
    """Links a student to a course by identifier.

    Student and course are referenced by value only; deleting either leaves
    the enrollment untouched.
    """

    kind_name: ClassVar[str] = "Enrollment"

    id: EntityId
    student_id: EntityId = Field(title="Student ID")
    course_id: EntityId = Field(title="Course ID")
    enrollment_date: date = Field(default_factory=date.today)
    status: EnrollmentStatus = EnrollmentStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status is EnrollmentStatus.ACTIVE
