# Path: ledger_report/model/__init__.py
"""
Ledger Model

The minimal data model the report engine reads from: amounts and
balances, the account tree, entries and transactions, and the Details
render context wrapping one of them.
"""

from .amount import Amount, Balance
from .account import Account
from .journal import Entry, EntryState, Transaction
from .details import Details

__all__ = [
    'Amount',
    'Balance',
    'Account',
    'Entry',
    'EntryState',
    'Transaction',
    'Details',
]
