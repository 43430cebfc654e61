# Path: ledger_report/reports/__init__.py
"""
Report Drivers

Stateful visitors that render a stream of ledger items through
compiled formats.

    FormatTransactions  first-line / continuation transaction report
    FormatAccount       account-tree report with display predicate
    FormatEquity        opening-balances report that sums to zero
    ReportGenerator     standard reports from configured formats
"""

from .base_handler import ReportHandler, ChainedHandler
from .transactions import FormatTransactions
from .accounts import (
    FormatAccount,
    should_display,
    should_recurse_into_subaccounts,
)
from .equity import FormatEquity
from .walk import (
    walk_entries,
    walk_transactions,
    walk_accounts,
    clear_display_flags,
    CalcTransactions,
    SumAccounts,
)
from .report_generator import ReportGenerator

__all__ = [
    'ReportHandler',
    'ChainedHandler',
    'FormatTransactions',
    'FormatAccount',
    'should_display',
    'should_recurse_into_subaccounts',
    'FormatEquity',
    'walk_entries',
    'walk_transactions',
    'walk_accounts',
    'clear_display_flags',
    'CalcTransactions',
    'SumAccounts',
    'ReportGenerator',
]
