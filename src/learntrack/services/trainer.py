"""Trainer service."""

from __future__ import annotations

from typing import Any

from learntrack.domain import Trainer
from learntrack.id_allocator import EntityKind
from learntrack.services.base import EntityService


class TrainerService(EntityService[Trainer]):
    """Creates and manages trainers. Trainers carry no active flag."""

    kind = EntityKind.TRAINER

    def create_trainer(
        self,
        first_name: str,
        last_name: str,
        specialization: str,
        years_of_experience: int = 0,
        email: str | None = None,
    ) -> Trainer:
        """Create a new trainer.

        Raises:
            ValidationError: If any field is malformed.
            RangeExhaustedError: If no trainer IDs are left.
        """
        return self._create(
            first_name=first_name,
            last_name=last_name,
            email=email,
            specialization=specialization,
            years_of_experience=years_of_experience,
        )

    def update_trainer(self, trainer_id: int, **changes: Any) -> Trainer:
        return self._replace(trainer_id, changes)
