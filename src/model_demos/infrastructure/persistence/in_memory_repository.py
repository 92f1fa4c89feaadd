"""Dict-backed implementations of the domain repositories.

Items are kept in insertion order. Nothing outlives the process.
"""

from __future__ import annotations

import logging

from model_demos.domain.exceptions import (
    DuplicateKeyError,
    EntityNotFoundError,
    InvalidQuantityError,
)
from model_demos.domain.repository.inventory_repository import (
    InventoryRepository,
    ItemT,
)
from model_demos.domain.repository.repository import Repository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T]):

    def __init__(
        self, items: list[T] | None = None, entity_name: str = "Item"
    ) -> None:
        self._entity_name = entity_name
        self._store: dict[int, T] = {}
        for item in items or []:
            self.add(item)

    # --- Repository interface -------------------------------------------------

    def add(self, item: T) -> None:
        if item.id in self._store:
            raise DuplicateKeyError(
                f"{self._entity_name} with ID {item.id} already exists"
            )
        self._store[item.id] = item
        logger.debug("Added %s #%s", self._entity_name, item.id)

    def get_by_id(self, item_id: int) -> T:
        try:
            return self._store[item_id]
        except KeyError:
            raise self._not_found(item_id) from None

    def remove(self, item_id: int) -> None:
        if item_id not in self._store:
            raise self._not_found(item_id)
        del self._store[item_id]
        logger.debug("Removed %s #%s", self._entity_name, item_id)

    def list_all(self) -> list[T]:
        return list(self._store.values())

    def _not_found(self, item_id: int) -> EntityNotFoundError:
        return EntityNotFoundError(f"{self._entity_name} with ID {item_id} not found")


class InMemoryInventoryRepository(
    InMemoryRepository[ItemT], InventoryRepository[ItemT]
):

    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        if new_quantity < 0:
            raise InvalidQuantityError(
                f"Quantity cannot be negative, got {new_quantity}"
            )
        item = self.get_by_id(item_id)
        item.set_quantity(new_quantity)
        logger.debug(
            "Set quantity of %s #%s to %s", self._entity_name, item_id, new_quantity
        )
