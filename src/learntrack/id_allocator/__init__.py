"""Identifier Allocator - Range-partitioned identifiers per entity kind."""

from learntrack.id_allocator.allocator import CapacityListener, IdAllocator, check_disjoint
from learntrack.id_allocator.exceptions import (
    CapacityReachedError,
    IdAllocatorError,
    InvalidRangeError,
    RangeExhaustedError,
)
from learntrack.id_allocator.models import (
    DEFAULT_RANGES,
    DEFAULT_WARNING_THRESHOLD,
    CapacityWarning,
    EntityKind,
    IdRange,
    KindUsage,
)

__all__ = [
    "DEFAULT_RANGES",
    "DEFAULT_WARNING_THRESHOLD",
    "CapacityListener",
    "CapacityReachedError",
    "CapacityWarning",
    "EntityKind",
    "IdAllocator",
    "IdAllocatorError",
    "IdRange",
    "InvalidRangeError",
    "KindUsage",
    "RangeExhaustedError",
    "check_disjoint",
]
