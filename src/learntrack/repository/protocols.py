"""Capabilities an entity kind must provide to be stored."""

from __future__ import annotations

from typing import ClassVar, Protocol


class Identifiable(Protocol):
    """An entity with an integer identifier and a human-readable kind name."""

    kind_name: ClassVar[str]

    @property
    def id(self) -> int: ...


class Activatable(Identifiable, Protocol):
    """An identifiable entity carrying an active/inactive flag."""

    active: bool
