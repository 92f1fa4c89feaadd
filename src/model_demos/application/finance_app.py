"""Application service: finance demo.

Processes a few transactions through different payment channels and
applies them to a savings account.
"""

from __future__ import annotations

import logging
from datetime import datetime

from model_demos.domain.exceptions import InsufficientFundsError
from model_demos.domain.model.finance import Account, SavingsAccount, Transaction
from model_demos.domain.model.value_objects import Money
from model_demos.domain.service.transaction_processor import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
)

logger = logging.getLogger(__name__)

SAMPLE_ACCOUNT_NUMBER = "SA-1001"
SAMPLE_OPENING_BALANCE = "1000.00"
SAMPLE_TRANSACTIONS: tuple[tuple[int, str, str], ...] = (
    (1, "120.50", "Groceries"),
    (2, "250.00", "Utilities"),
    (3, "900.00", "Entertainment"),
)


class FinanceApp:

    def __init__(self, account: Account | None = None) -> None:
        self._account = account or SavingsAccount(
            SAMPLE_ACCOUNT_NUMBER, Money.of(SAMPLE_OPENING_BALANCE)
        )
        self._transactions: list[Transaction] = []

    @property
    def account(self) -> Account:
        return self._account

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def apply(self, transaction: Transaction) -> str:
        """Apply a transaction to the account, reporting a refusal."""
        try:
            return self._account.apply_transaction(transaction)
        except InsufficientFundsError as exc:
            logger.warning("%s", exc)
            return "Insufficient funds"

    def record(self, transactions: list[Transaction]) -> None:
        self._transactions.extend(transactions)

    def run(self, now: datetime | None = None) -> list[str]:
        now = now or datetime.now()
        transactions = [
            Transaction(id=tx_id, date=now, amount=Money.of(amount), category=category)
            for tx_id, amount, category in SAMPLE_TRANSACTIONS
        ]
        processors: list[TransactionProcessor] = [
            MobileMoneyProcessor(),
            BankTransferProcessor(),
            CryptoWalletProcessor(),
        ]

        lines = ["--- FinanceApp Start ---"]
        lines.extend(p.process(t) for p, t in zip(processors, transactions))
        # the last transaction overdraws the account
        lines.extend(self.apply(t) for t in transactions)
        self.record(transactions)
        lines.append("--- FinanceApp End ---")
        return lines
