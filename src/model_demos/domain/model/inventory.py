"""Warehouse inventory records.

Electronic and grocery items share the same identity and stock fields
and differ only in the extra attributes they carry.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from model_demos.domain.exceptions import InvalidQuantityError


@dataclass
class InventoryItem:
    """Base record for anything stored in a warehouse repository.

    Invariant: ``quantity`` is never negative.
    """

    id: int
    name: str
    quantity: int

    def __post_init__(self) -> None:
        self._check_quantity(self.quantity)

    def set_quantity(self, new_quantity: int) -> None:
        """Overwrite the stock level."""
        self._check_quantity(new_quantity)
        self.quantity = new_quantity

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} qty={self.quantity}"

    def _check_quantity(self, quantity: int) -> None:
        if quantity < 0:
            raise InvalidQuantityError(
                f"Quantity for {self.name} cannot be negative, got {quantity}"
            )


@dataclass
class ElectronicItem(InventoryItem):
    brand: str = ""
    warranty_months: int = 0

    def __str__(self) -> str:
        return (
            f"[{self.id}] {self.name} ({self.brand}) qty={self.quantity} "
            f"warranty={self.warranty_months}mo"
        )


@dataclass
class GroceryItem(InventoryItem):
    expiry_date: date | None = None

    def __str__(self) -> str:
        expiry = self.expiry_date.isoformat() if self.expiry_date else "n/a"
        return f"[{self.id}] {self.name} qty={self.quantity} expires={expiry}"
