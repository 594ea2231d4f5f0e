"""IdAllocator - Range-partitioned, monotonic identifier generation."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass

from learntrack.id_allocator.exceptions import (
    CapacityReachedError,
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

logger = logging.getLogger(__name__)

CapacityListener = Callable[[CapacityWarning], None]


@dataclass
class _Counter:
    """Mutable allocation state for one kind. Guarded by its own lock."""

    id_range: IdRange
    next_id: int
    issued: int
    lock: threading.Lock

    @classmethod
    def starting_at(cls, id_range: IdRange) -> _Counter:
        return cls(id_range=id_range, next_id=id_range.start, issued=0, lock=threading.Lock())

    @property
    def remaining(self) -> int:
        return self.id_range.end - self.next_id + 1

    @property
    def usage(self) -> float:
        return self.issued / self.id_range.capacity


class IdAllocator:
    """Issues unique identifiers from a disjoint numeric range per entity kind.

    Identifiers of different kinds can never collide because every kind owns
    a non-overlapping interval. Within a kind, identifiers are handed out in
    strictly increasing order with no gaps until the range is exhausted.

    All mutations and multi-field reads of a kind's counter hold that kind's
    lock, so concurrent callers never receive the same identifier and readers
    never see a half-applied increment.

    A single instance is built at start-up and passed to every service that
    needs identifiers.
    """

    def __init__(
        self,
        ranges: Mapping[EntityKind, IdRange] | None = None,
        warning_threshold: float = DEFAULT_WARNING_THRESHOLD,
        on_capacity_warning: CapacityListener | None = None,
    ) -> None:
        """Initialize the allocator.

        Args:
            ranges: Range per kind. Defaults to DEFAULT_RANGES.
            warning_threshold: Usage fraction at which capacity warnings start.
            on_capacity_warning: Optional listener for capacity warnings.

        Raises:
            ValueError: If two ranges overlap or the threshold is not in (0, 1].
        """
        if ranges is None:
            ranges = DEFAULT_RANGES
        if not 0 < warning_threshold <= 1:
            raise ValueError(f"Warning threshold must be in (0, 1], got {warning_threshold}")
        check_disjoint(ranges)

        self.warning_threshold = warning_threshold
        self._counters: dict[EntityKind, _Counter] = {
            kind: _Counter.starting_at(id_range) for kind, id_range in ranges.items()
        }
        self._listeners: list[CapacityListener] = []
        if on_capacity_warning is not None:
            self._listeners.append(on_capacity_warning)

    # --- Configuration queries ---

    @property
    def kinds(self) -> list[EntityKind]:
        """Kinds this allocator issues identifiers for."""
        return list(self._counters)

    def range_for(self, kind: EntityKind) -> IdRange:
        """Get the inclusive range reserved for a kind."""
        return self._counter(kind).id_range

    def capacity(self, kind: EntityKind) -> int:
        """Get the total number of identifiers in a kind's range."""
        return self._counter(kind).id_range.capacity

    def add_listener(self, listener: CapacityListener) -> None:
        """Register a callback invoked with every capacity warning."""
        self._listeners.append(listener)

    # --- Allocation ---

    def next_id(self, kind: EntityKind) -> int:
        """Issue the next identifier for a kind.

        Args:
            kind: The entity kind to allocate for.

        Returns:
            The smallest identifier not yet issued in the kind's range.

        Raises:
            RangeExhaustedError: If the range has no identifiers left. The
                counter is left untouched.
        """
        counter = self._counter(kind)
        with counter.lock:
            id_range = counter.id_range
            if counter.next_id > id_range.end:
                raise RangeExhaustedError(
                    f"{kind.label} ID range exhausted! Maximum capacity of "
                    f"{id_range.capacity} reached. Range {id_range} is full."
                )
            issued_id = counter.next_id
            counter.next_id += 1
            counter.issued += 1
            warning = self._check_capacity(kind, counter)

        if warning is not None:
            self._emit(warning)
        return issued_id

    def validate(self, kind: EntityKind, value: int) -> None:
        """Check that an identifier belongs to a kind's range.

        Raises:
            InvalidRangeError: If the identifier is outside the range.
        """
        id_range = self._counter(kind).id_range
        if not id_range.contains(value):
            raise InvalidRangeError(
                f"{kind.label} ID {value} is outside valid range {id_range}"
            )

    def register_external(self, kind: EntityKind, value: int) -> None:
        """Register an identifier minted outside this allocator (bulk import).

        Advances the counter past the identifier if needed; the counter never
        moves backwards. Does not check whether the identifier is already
        stored anywhere, which is the caller's responsibility.

        Args:
            kind: The entity kind the identifier belongs to.
            value: The externally assigned identifier.

        Raises:
            InvalidRangeError: If the identifier is outside the kind's range.
            CapacityReachedError: If the kind's capacity is already used up.
        """
        self.validate(kind, value)
        counter = self._counter(kind)
        with counter.lock:
            if counter.issued >= counter.id_range.capacity:
                raise CapacityReachedError(
                    f"Cannot register {kind.label} ID {value} - capacity already reached"
                )
            counter.issued += 1
            if value >= counter.next_id:
                counter.next_id = value + 1
                if counter.next_id > counter.id_range.end:
                    logger.warning("%s ID counter at maximum range limit", kind.label)

    # --- Usage queries ---

    def remaining(self, kind: EntityKind) -> int:
        """Get the number of identifiers next_id() can still issue."""
        counter = self._counter(kind)
        with counter.lock:
            return counter.remaining

    def usage_percent(self, kind: EntityKind) -> float:
        """Get the issued fraction of a kind's range, in [0, 1]."""
        counter = self._counter(kind)
        with counter.lock:
            return counter.usage

    def usage(self, kind: EntityKind) -> KindUsage:
        """Get a consistent snapshot of a kind's allocation state."""
        counter = self._counter(kind)
        with counter.lock:
            return KindUsage(
                kind=kind,
                id_range=counter.id_range,
                next_id=counter.next_id,
                issued=counter.issued,
                remaining=counter.remaining,
                usage=counter.usage,
            )

    def is_approaching_capacity(self) -> bool:
        """Check whether any kind has reached the warning threshold."""
        return any(self.usage_percent(kind) >= self.warning_threshold for kind in self._counters)

    def capacity_summary(self) -> str:
        """One-line issued/capacity overview of every kind."""
        parts = []
        for kind in self._counters:
            snapshot = self.usage(kind)
            parts.append(
                f"{kind.label}s: {snapshot.issued}/{snapshot.id_range.capacity} "
                f"({snapshot.usage:.1%})"
            )
        return " | ".join(parts)

    def reset(self) -> None:
        """Restore every counter to its range start. Test use only."""
        for counter in self._counters.values():
            with counter.lock:
                counter.next_id = counter.id_range.start
                counter.issued = 0

    # --- Internals ---

    def _counter(self, kind: EntityKind) -> _Counter:
        try:
            return self._counters[kind]
        except KeyError:
            raise KeyError(f"No identifier range configured for kind '{kind}'") from None

    def _check_capacity(self, kind: EntityKind, counter: _Counter) -> CapacityWarning | None:
        usage = counter.usage
        if usage < self.warning_threshold:
            return None
        return CapacityWarning(kind=kind, usage=usage, remaining=counter.remaining)

    def _emit(self, warning: CapacityWarning) -> None:
        logger.warning("%s", warning)
        for listener in self._listeners:
            listener(warning)


def check_disjoint(ranges: Mapping[EntityKind, IdRange]) -> None:
    """Ensure no two kinds share an identifier.

    Raises:
        ValueError: If any two ranges intersect.
    """
    items = list(ranges.items())
    for index, (kind, id_range) in enumerate(items):
        for other_kind, other_range in items[index + 1 :]:
            if id_range.overlaps(other_range):
                raise ValueError(
                    f"ID ranges for {kind.label} {id_range} and "
                    f"{other_kind.label} {other_range} overlap"
                )
