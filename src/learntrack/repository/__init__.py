"""Entity Repository - Generic in-memory CRUD stores."""

from learntrack.repository.exceptions import (
    DuplicateIdError,
    EntityNotFoundError,
    RepositoryError,
)
from learntrack.repository.protocols import Activatable, Identifiable
from learntrack.repository.store import EntityStore, StatusAwareStore

__all__ = [
    "Activatable",
    "DuplicateIdError",
    "EntityNotFoundError",
    "EntityStore",
    "Identifiable",
    "RepositoryError",
    "StatusAwareStore",
]
