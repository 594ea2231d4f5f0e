"""Shared service plumbing: pass-throughs to the repository layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from learntrack.domain.exceptions import ValidationError
from learntrack.repository import Activatable, DuplicateIdError, Identifiable, StatusAwareStore

if TYPE_CHECKING:
    from learntrack.id_allocator import EntityKind, IdAllocator
    from learntrack.repository import EntityStore

T = TypeVar("T", bound=Identifiable)
A = TypeVar("A", bound=Activatable)


class EntityService(Generic[T]):
    """Common operations for one entity kind.

    Subclasses set ``kind`` to the allocator range their identifiers come from.
    """

    kind: ClassVar[EntityKind]

    def __init__(self, store: EntityStore[T], allocator: IdAllocator) -> None:
        """Initialize the service.

        Args:
            store: Store owning this kind's entities.
            allocator: Shared identifier allocator.
        """
        self.store = store
        self.allocator = allocator

    @property
    def entity_name(self) -> str:
        return self.store.kind_name

    def get_by_id(self, entity_id: int) -> T:
        """Get an entity by ID.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        return self.store.get_by_id(entity_id)

    def get_all(self) -> list[T]:
        return self.store.find_all()

    def update(self, entity: T) -> None:
        """Replace a stored entity with a new version.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        self.store.update(entity)

    def exists(self, entity_id: int) -> bool:
        return self.store.exists(entity_id)

    def total_count(self) -> int:
        return self.store.count()

    def import_existing(self, entity: T) -> T:
        """Store an entity whose ID was assigned elsewhere (bulk load).

        The ID is registered with the allocator so later allocations never
        reuse it.

        Raises:
            DuplicateIdError: If an entity with this ID is already stored.
            InvalidRangeError: If the ID is outside this kind's range.
            CapacityReachedError: If the kind's capacity is used up.
        """
        if self.store.exists(entity.id):
            raise DuplicateIdError(self.entity_name, entity.id)
        self.allocator.register_external(self.kind, entity.id)
        self.store.add(entity)
        return entity

    def _create(self, **fields: Any) -> T:
        """Validate fields, then store a new entity with a freshly allocated ID.

        Validation runs before allocation so a rejected entity never consumes
        an identifier.

        Raises:
            ValidationError: If any field is malformed.
            RangeExhaustedError: If no identifiers are left for this kind.
        """
        entity_type = self.store.entity_type
        draft = entity_type(id=self.allocator.range_for(self.kind).start, **fields)
        entity = draft.model_copy(update={"id": self.allocator.next_id(self.kind)})
        self.store.add(entity)
        return entity

    def _replace(self, entity_id: int, changes: dict[str, Any]) -> T:
        """Build a revalidated copy of an entity with some fields changed and store it."""
        if "id" in changes:
            raise ValidationError("id", f"{self.entity_name} ID cannot be changed")
        entity_type = self.store.entity_type
        unknown = sorted(set(changes) - set(entity_type.model_fields))
        if unknown:
            raise ValidationError(
                unknown[0], f"Invalid {self.entity_name} field: {', '.join(unknown)}"
            )
        current = self.store.get_by_id(entity_id)
        updated = entity_type(**{**current.model_dump(), **changes})
        self.store.update(updated)
        return updated


class StatusAwareService(EntityService[A]):
    """Adds active/inactive queries for kinds with an active flag."""

    def __init__(self, store: EntityStore[A], allocator: IdAllocator) -> None:
        super().__init__(store, allocator)
        self.status = StatusAwareStore(store)

    def get_all_active(self) -> list[A]:
        return self.status.find_all_active()

    def active_count(self) -> int:
        return self.status.count_active()

    def activate(self, entity_id: int) -> A:
        """Mark an entity active.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        return self.status.activate(entity_id)

    def deactivate(self, entity_id: int) -> A:
        """Mark an entity inactive.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        return self.status.deactivate(entity_id)
