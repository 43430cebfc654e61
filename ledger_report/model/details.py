# Path: ledger_report/model/details.py
"""
Render Context

Details is the view handed to the renderer and to value expressions.
It wraps exactly one subject (a transaction, an account or a bare
entry) and exposes the entry and account reachable from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .account import Account
from .journal import Entry, Transaction


@dataclass(frozen=True, eq=False)
class Details:
    """
    Context for one render call.

    Use the for_* constructors rather than filling fields by hand.
    """
    entry: Optional[Entry] = None
    xact: Optional[Transaction] = None
    account: Optional[Account] = None

    @classmethod
    def for_transaction(cls, xact: Transaction) -> Details:
        return cls(entry=xact.entry, xact=xact, account=xact.account)

    @classmethod
    def for_account(cls, account: Account) -> Details:
        return cls(account=account)

    @classmethod
    def for_entry(cls, entry: Entry) -> Details:
        return cls(entry=entry)


__all__ = ['Details']
