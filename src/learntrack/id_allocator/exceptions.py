"""Custom exceptions for the Identifier Allocator."""

from learntrack.errors import ErrorKind, LearnTrackError


class IdAllocatorError(LearnTrackError):
    """Base exception for Identifier Allocator errors."""


class InvalidRangeError(IdAllocatorError):
    """Identifier lies outside the range reserved for its kind."""

    kind = ErrorKind.INVALID_RANGE


class RangeExhaustedError(IdAllocatorError):
    """Every identifier in the kind's range has already been issued."""

    kind = ErrorKind.RANGE_EXHAUSTED


class CapacityReachedError(IdAllocatorError):
    """Registering another identifier would exceed the kind's capacity."""

    kind = ErrorKind.CAPACITY_REACHED
