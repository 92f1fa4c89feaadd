"""Application service: warehouse inventory demo.

Electronics and groceries live in separate repositories. Every failure
a repository raises is caught here and turned into a reported line.
"""

from __future__ import annotations

import logging
from datetime import date

from model_demos.domain.exceptions import DomainException
from model_demos.domain.model.inventory import (
    ElectronicItem,
    GroceryItem,
    InventoryItem,
)
from model_demos.domain.repository.inventory_repository import (
    InventoryRepository,
    ItemT,
)

logger = logging.getLogger(__name__)


class WarehouseManager:

    def __init__(
        self,
        electronics: InventoryRepository[ElectronicItem],
        groceries: InventoryRepository[GroceryItem],
    ) -> None:
        self._electronics = electronics
        self._groceries = groceries

    @property
    def electronics(self) -> InventoryRepository[ElectronicItem]:
        return self._electronics

    @property
    def groceries(self) -> InventoryRepository[GroceryItem]:
        return self._groceries

    def seed_data(self) -> None:
        for item in (
            ElectronicItem(1, "Laptop", 10, brand="Dell", warranty_months=24),
            ElectronicItem(2, "Smartphone", 25, brand="Samsung", warranty_months=12),
            ElectronicItem(3, "Headphones", 40, brand="Sony", warranty_months=6),
        ):
            self._electronics.add(item)

        for item in (
            GroceryItem(1, "Rice (5kg)", 100, expiry_date=date(2027, 6, 30)),
            GroceryItem(2, "Milk (1L)", 60, expiry_date=date(2026, 11, 2)),
            GroceryItem(3, "Bread", 35, expiry_date=date(2026, 10, 24)),
        ):
            self._groceries.add(item)

    # --- Operations -----------------------------------------------------------
    # Each returns the line to report. None of them raise DomainException.

    def list_items(self, repo: InventoryRepository[ItemT]) -> list[str]:
        items = repo.list_all()
        if not items:
            return ["  (no items)"]
        return [f"  {item}" for item in items]

    def add_item(self, repo: InventoryRepository[ItemT], item: ItemT) -> str:
        try:
            repo.add(item)
        except DomainException as exc:
            return self._report(exc)
        return f"Added {item.name} (ID: {item.id})"

    def increase_stock(
        self, repo: InventoryRepository[ItemT], item_id: int, quantity: int
    ) -> str:
        try:
            item = repo.get_by_id(item_id)
            repo.update_quantity(item_id, item.quantity + quantity)
        except DomainException as exc:
            return self._report(exc)
        return f"Stock of {item.name} is now {item.quantity}"

    def set_quantity(
        self, repo: InventoryRepository[ItemT], item_id: int, quantity: int
    ) -> str:
        try:
            repo.update_quantity(item_id, quantity)
        except DomainException as exc:
            return self._report(exc)
        return f"Quantity of item {item_id} set to {quantity}"

    def remove_item(self, repo: InventoryRepository[ItemT], item_id: int) -> str:
        try:
            item: InventoryItem = repo.get_by_id(item_id)
            repo.remove(item_id)
        except DomainException as exc:
            return self._report(exc)
        return f"Removed {item.name} (ID: {item_id})"

    def run(self) -> list[str]:
        self.seed_data()

        lines = ["--- WarehouseManager Start ---", "Electronics:"]
        lines.extend(self.list_items(self._electronics))
        lines.append("Groceries:")
        lines.extend(self.list_items(self._groceries))

        lines.append(self.add_item(
            self._electronics,
            ElectronicItem(1, "Tablet", 5, brand="Apple", warranty_months=12),
        ))
        lines.append(self.remove_item(self._groceries, 99))
        lines.append(self.set_quantity(self._electronics, 2, -5))

        lines.append(self.increase_stock(self._groceries, 2, 20))
        lines.append(self.remove_item(self._electronics, 3))

        lines.append("Electronics:")
        lines.extend(self.list_items(self._electronics))
        lines.append("--- WarehouseManager End ---")
        return lines

    @staticmethod
    def _report(exc: DomainException) -> str:
        logger.warning("%s: %s", type(exc).__name__, exc)
        return f"Error: {exc}"
