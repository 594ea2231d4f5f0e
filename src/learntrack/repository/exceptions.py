"""Custom exceptions for the Entity Repository."""

from learntrack.errors import ErrorKind, LearnTrackError


class RepositoryError(LearnTrackError):
    """Base exception for Entity Repository errors."""


class EntityNotFoundError(RepositoryError):
    """Entity with given ID does not exist."""

    kind = ErrorKind.ENTITY_NOT_FOUND

    def __init__(self, kind_name: str, entity_id: int) -> None:
        super().__init__(f"{kind_name} with ID {entity_id} not found")
        self.kind_name = kind_name
        self.entity_id = entity_id


class DuplicateIdError(RepositoryError):
    """Entity with given ID is already stored."""

    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, kind_name: str, entity_id: int) -> None:
        super().__init__(f"{kind_name} with ID {entity_id} already exists")
        self.kind_name = kind_name
        self.entity_id = entity_id
