"""Abstract store for point-in-time snapshots of a repository.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON files) live in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class SnapshotStore(ABC, Generic[T]):

    @abstractmethod
    def load(self) -> list[T]:
        """Return the last saved records, or an empty list if none."""

    @abstractmethod
    def save(self, items: list[T]) -> None:
        """Overwrite the stored snapshot with *items*."""
