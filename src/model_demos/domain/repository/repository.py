"""Abstract id-keyed repository shared by every demo.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Protocol, TypeVar


class Identified(Protocol):
    id: int


T = TypeVar("T", bound=Identified)


class Repository(ABC, Generic[T]):
    """Holds at most one item per id."""

    @abstractmethod
    def add(self, item: T) -> None:
        """Store a new item.

        Raises DuplicateKeyError if an item with the same id is already
        stored; the stored item is left unchanged.
        """

    @abstractmethod
    def get_by_id(self, item_id: int) -> T:
        """Return the item with this id. Raises EntityNotFoundError."""

    @abstractmethod
    def remove(self, item_id: int) -> None:
        """Delete the item with this id. Raises EntityNotFoundError."""

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return a snapshot of every stored item, in insertion order."""

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        """Return the stored items matching *predicate*."""
        return [item for item in self.list_all() if predicate(item)]
