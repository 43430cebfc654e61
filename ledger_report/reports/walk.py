# Path: ledger_report/reports/walk.py
"""
Traversal Helpers

Feed entries, transactions and accounts to ReportHandler objects.

    walk_entries       every transaction of every entry, in order
    walk_transactions  a flat transaction sequence
    walk_accounts      the account tree, parents before children,
                       children in name order

Chained handlers prepare items before passing them on:

    CalcTransactions   fills in each transaction's running total
    SumAccounts        posts transaction amounts into account values

Example:
    handler = CalcTransactions(FormatTransactions(out, first, rest))
    walk_entries(entries, handler)
    handler.flush()
"""

from typing import Iterable, Optional

from ..core.logger.ipo_logging import get_process_logger
from ..model.account import Account
from ..model.amount import Balance
from ..model.journal import Entry, Transaction
from .base_handler import ChainedHandler, ReportHandler


logger = get_process_logger('walk')


def walk_transactions(
    xacts: Iterable[Transaction],
    handler: ReportHandler[Transaction]
) -> None:
    for xact in xacts:
        handler.visit(xact)


def walk_entries(
    entries: Iterable[Entry],
    handler: ReportHandler[Transaction]
) -> None:
    count = 0
    for entry in entries:
        walk_transactions(entry.transactions, handler)
        count += 1
    logger.debug(f"Walked {count} entries")


def walk_accounts(
    account: Account,
    handler: ReportHandler[Account]
) -> None:
    """
    Visit an account and all its descendants, depth first.

    Uses an explicit stack, so deep trees do not hit the recursion limit.
    """
    stack = [account]
    while stack:
        current = stack.pop()
        handler.visit(current)
        stack.extend(reversed(current.sorted_children()))


def clear_display_flags(
    entries: Iterable[Entry] = (),
    master: Optional[Account] = None
) -> None:
    """Reset displayed flags so the same data can be reported again."""
    for entry in entries:
        for xact in entry.transactions:
            xact.displayed = False
    if master is not None:
        stack = [master]
        while stack:
            account = stack.pop()
            account.displayed = False
            stack.extend(account.children.values())


class CalcTransactions(ChainedHandler[Transaction]):
    """Set each transaction's total to the running sum so far."""

    def __init__(self, handler: ReportHandler[Transaction]):
        super().__init__(handler)
        self.running_total = Balance()

    def visit(self, xact: Transaction) -> None:
        self.running_total += xact.amount
        xact.total = self.running_total.copy()
        super().visit(xact)


class SumAccounts(ReportHandler[Transaction]):
    """Add each visited transaction's amount to its account's value."""

    def __init__(self):
        self.posted = 0

    def visit(self, xact: Transaction) -> None:
        xact.account.value += xact.amount
        self.posted += 1

    def flush(self) -> None:
        logger.debug(f"Posted {self.posted} transactions to accounts")


__all__ = [
    'walk_transactions',
    'walk_entries',
    'walk_accounts',
    'clear_display_flags',
    'CalcTransactions',
    'SumAccounts',
]
