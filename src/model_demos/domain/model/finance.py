"""Finance records: transactions and the accounts they are applied to."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from model_demos.domain.exceptions import InsufficientFundsError, ValidationError
from model_demos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Transaction:
    id: int
    date: datetime
    amount: Money
    category: str

    def __post_init__(self) -> None:
        if not self.amount.is_positive:
            raise ValidationError(
                f"Transaction amount must be positive, got {self.amount}"
            )


class Account:
    """A plain account. Applying a transaction always deducts its amount,
    so the balance may go negative."""

    kind = "Account"

    def __init__(self, account_number: str, initial_balance: Money) -> None:
        self.account_number = account_number
        self.balance = initial_balance

    def apply_transaction(self, transaction: Transaction) -> str:
        self.balance = self.balance - transaction.amount
        return (
            f"{self.kind} {self.account_number}: Applied {transaction.amount}. "
            f"New balance: {self.balance}"
        )


class SavingsAccount(Account):
    """An account that refuses to be overdrawn."""

    kind = "SavingsAccount"

    def apply_transaction(self, transaction: Transaction) -> str:
        """Deduct the transaction amount.

        Raises InsufficientFundsError, leaving the balance untouched, when
        the amount exceeds the current balance.
        """
        if transaction.amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient funds in {self.account_number}: "
                f"need {transaction.amount}, balance is {self.balance}"
            )
        self.balance = self.balance - transaction.amount
        return (
            f"{self.kind} {self.account_number}: Deducted {transaction.amount}. "
            f"Updated balance: {self.balance}"
        )
