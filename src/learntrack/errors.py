"""Error taxonomy shared by all LearnTrack components."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Discriminator for LearnTrack failures.

    Every core exception carries one of these so callers can match on the
    failure kind instead of walking the exception hierarchy.
    """

    VALIDATION = "validation"
    ENTITY_NOT_FOUND = "entity_not_found"
    DUPLICATE_ID = "duplicate_id"
    INVALID_STATE = "invalid_state"
    INVALID_RANGE = "invalid_range"
    RANGE_EXHAUSTED = "range_exhausted"
    CAPACITY_REACHED = "capacity_reached"


class LearnTrackError(Exception):
    """Base exception for all LearnTrack core errors."""

    kind: ErrorKind
