"""Abstract repository for warehouse inventory items."""

from __future__ import annotations

from abc import abstractmethod
from typing import TypeVar

from model_demos.domain.model.inventory import InventoryItem
from model_demos.domain.repository.repository import Repository

ItemT = TypeVar("ItemT", bound=InventoryItem)


class InventoryRepository(Repository[ItemT]):

    @abstractmethod
    def update_quantity(self, item_id: int, new_quantity: int) -> None:
        """Overwrite the stored quantity of an item.

        Raises InvalidQuantityError for a negative quantity before looking
        the id up, then EntityNotFoundError if the id is absent.
        """
