"""Payment channels a transaction can be processed through."""

from __future__ import annotations

from abc import ABC, abstractmethod

from model_demos.domain.model.finance import Transaction


class TransactionProcessor(ABC):

    channel: str

    @abstractmethod
    def process(self, transaction: Transaction) -> str:
        """Process a transaction and describe what was done."""


class _ChannelProcessor(TransactionProcessor):

    def process(self, transaction: Transaction) -> str:
        return (
            f"[{self.channel}] Processing {transaction.category}: "
            f"amount = {transaction.amount}"
        )


class BankTransferProcessor(_ChannelProcessor):
    channel = "BankTransfer"


class MobileMoneyProcessor(_ChannelProcessor):
    channel = "MobileMoney"


class CryptoWalletProcessor(_ChannelProcessor):
    channel = "CryptoWallet"
