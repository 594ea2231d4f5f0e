"""Data models for the Identifier Allocator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EntityKind(StrEnum):
    """Entity categories, each with its own identifier range."""

    PERSON = "person"
    STUDENT = "student"
    COURSE = "course"
    ENROLLMENT = "enrollment"
    TRAINER = "trainer"

    @property
    def label(self) -> str:
        """Human-readable kind name for messages."""
        return self.value.capitalize()


@dataclass(frozen=True)
class IdRange:
    """Inclusive identifier interval reserved for one entity kind."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start <= 0:
            raise ValueError(f"Range start must be positive, got {self.start}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is greater than end {self.end}")

    @property
    def capacity(self) -> int:
        """Number of identifiers in the range."""
        return self.end - self.start + 1

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.end

    def overlaps(self, other: IdRange) -> bool:
        return self.start <= other.end and other.start <= self.end

    def __str__(self) -> str:
        return f"[{self.start}-{self.end}]"


DEFAULT_RANGES: dict[EntityKind, IdRange] = {
    EntityKind.PERSON: IdRange(100, 999),
    EntityKind.STUDENT: IdRange(1000, 1999),
    EntityKind.COURSE: IdRange(2000, 2999),
    EntityKind.ENROLLMENT: IdRange(3000, 3999),
    EntityKind.TRAINER: IdRange(4000, 4999),
}

# Alert when 90% of a range has been issued
DEFAULT_WARNING_THRESHOLD = 0.9


@dataclass(frozen=True)
class CapacityWarning:
    """Emitted when issuance within a kind's range crosses the warning threshold.

    Attributes:
        kind: The entity kind running low on identifiers.
        usage: Fraction of the range issued so far, in [0, 1].
        remaining: Identifiers still available to next_id().
    """

    kind: EntityKind
    usage: float
    remaining: int

    def __str__(self) -> str:
        return (
            f"{self.kind.label} ID capacity at {self.usage * 100:.1f}% - "
            f"only {self.remaining} IDs remaining"
        )


@dataclass(frozen=True)
class KindUsage:
    """Consistent snapshot of one kind's allocation state.

    Attributes:
        kind: The entity kind.
        id_range: The kind's reserved range.
        next_id: Counter value the next allocation would return.
        issued: Identifiers issued or registered so far.
        remaining: Identifiers still available to next_id().
        usage: issued / capacity.
    """

    kind: EntityKind
    id_range: IdRange
    next_id: int
    issued: int
    remaining: int
    usage: float
