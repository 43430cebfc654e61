# Path: ledger_report/model/journal.py
"""
Entries and Transactions

An Entry is a dated, payee-labelled group of transactions; each
Transaction posts one amount to one account.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from .account import Account
from .amount import Amount, Balance


class EntryState(Enum):
    """Reconciliation state of an entry."""
    UNCLEARED = 'uncleared'
    CLEARED = 'cleared'
    PENDING = 'pending'


@dataclass(eq=False)
class Transaction:
    """
    One posting within an entry.

    Attributes:
        account: Account the amount is posted to
        amount: Posted amount
        cost: Total cost in another commodity, if priced
        auto: True for postings generated by automated entries
        entry: Owning entry, set by Entry.add_transaction
        total: Running total, filled in by CalcTransactions
        displayed: Set by report drivers once rendered
    """
    account: Account
    amount: Amount
    cost: Optional[Amount] = None
    auto: bool = False
    entry: Optional[Entry] = field(default=None, repr=False)
    total: Balance = field(default_factory=Balance, repr=False)
    displayed: bool = False


@dataclass(eq=False)
class Entry:
    """
    A dated group of transactions that balances to zero.

    Example:
        entry = Entry(datetime(2024, 1, 5), 'Grocer')
        entry.add_transaction(Transaction(food, Amount.parse('$42.00')))
        entry.add_transaction(Transaction(cash, Amount.parse('$-42.00')))
    """
    date: Optional[datetime] = None
    payee: str = ''
    code: str = ''
    state: EntryState = EntryState.UNCLEARED
    transactions: list[Transaction] = field(default_factory=list, repr=False)

    def add_transaction(self, xact: Transaction) -> Transaction:
        xact.entry = self
        self.transactions.append(xact)
        return xact

    @property
    def balance(self) -> Balance:
        """Sum of all transaction amounts (costs replace priced amounts)."""
        result = Balance()
        for xact in self.transactions:
            result += xact.cost if xact.cost is not None else xact.amount
        return result


__all__ = ['EntryState', 'Transaction', 'Entry']
