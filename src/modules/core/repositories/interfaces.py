"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on a storage backend directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).
    """

    @abstractmethod
    def create(self, entity: T) -> T:
        """Persist a new entity."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every entity in storage order."""

    @abstractmethod
    def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its identifier, ``None`` when absent."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Overwrite a stored entity."""

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove an entity by ID."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every entity."""
