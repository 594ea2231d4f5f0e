"""In-memory entity stores."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from learntrack.repository.exceptions import DuplicateIdError, EntityNotFoundError
from learntrack.repository.protocols import Activatable, Identifiable

T = TypeVar("T", bound=Identifiable)
A = TypeVar("A", bound=Activatable)


class EntityStore(Generic[T]):
    """In-memory collection of one entity kind, keyed by identifier.

    Identifiers are supplied by the caller, normally from the IdAllocator.
    Entities are kept in insertion order; update() replaces an entity in place
    without moving it.
    """

    def __init__(self, entity_type: type[T]) -> None:
        """Initialize an empty store.

        Args:
            entity_type: The entity class stored here. Its kind_name is used
                in error messages.
        """
        self.entity_type = entity_type
        self._entities: dict[int, T] = {}

    @property
    def kind_name(self) -> str:
        return self.entity_type.kind_name

    def add(self, entity: T) -> None:
        """Store a new entity.

        Raises:
            DuplicateIdError: If an entity with the same ID is already stored.
        """
        if entity.id in self._entities:
            raise DuplicateIdError(self.kind_name, entity.id)
        self._entities[entity.id] = entity

    def find_by_id(self, entity_id: int) -> T | None:
        """Get entity by ID, or None if absent."""
        return self._entities.get(entity_id)

    def get_by_id(self, entity_id: int) -> T:
        """Get entity by ID.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        entity = self._entities.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(self.kind_name, entity_id)
        return entity

    def find_all(self) -> list[T]:
        """Get a new list of all entities, in insertion order."""
        return list(self._entities.values())

    def update(self, entity: T) -> None:
        """Replace the stored entity that has the same ID.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        if entity.id not in self._entities:
            raise EntityNotFoundError(self.kind_name, entity.id)
        self._entities[entity.id] = entity

    def exists(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def count(self) -> int:
        return len(self._entities)

    def delete_by_id(self, entity_id: int) -> bool:
        """Remove an entity. Returns whether anything was removed."""
        return self._entities.pop(entity_id, None) is not None

    def clear(self) -> None:
        self._entities.clear()

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        """Get entities matching a predicate, in insertion order."""
        return [entity for entity in self._entities.values() if predicate(entity)]

    def count_where(self, predicate: Callable[[T], bool]) -> int:
        return sum(1 for entity in self._entities.values() if predicate(entity))

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"<EntityStore(kind={self.kind_name!r}, count={len(self._entities)})>"


class StatusAwareStore(Generic[A]):
    """Active/inactive queries and toggles over an EntityStore.

    Only kinds with a boolean active flag can be wrapped, so kinds with a
    richer status (enrollments) never expose activate/deactivate.
    """

    def __init__(self, store: EntityStore[A]) -> None:
        self.store = store

    def find_all_active(self) -> list[A]:
        """Get active entities, in insertion order."""
        return self.store.filter(_is_active)

    def count_active(self) -> int:
        return self.store.count_where(_is_active)

    def activate(self, entity_id: int) -> A:
        """Mark an entity active. Idempotent.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        return self._set_active(entity_id, True)

    def deactivate(self, entity_id: int) -> A:
        """Mark an entity inactive. Idempotent.

        Raises:
            EntityNotFoundError: If no entity has this ID.
        """
        return self._set_active(entity_id, False)

    def _set_active(self, entity_id: int, active: bool) -> A:
        entity = self.store.get_by_id(entity_id)
        entity.active = active
        return entity


def _is_active(entity: Activatable) -> bool:
    return entity.active
