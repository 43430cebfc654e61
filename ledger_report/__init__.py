# Path: ledger_report/__init__.py
"""
ledger_report - Templated Report Engine for Ledgers

Compiles printf-style format strings into element sequences and
renders transactions, accounts and entries through them to produce
columnar text reports.

Packages:
    format   directive parser, renderer, value/total evaluator
    reports  transaction, account and equity report drivers
    expr     value expressions and display predicates
    model    amounts, balances, accounts, entries, transactions
"""

from .core.logger import configure_logging
from .errors import (
    LedgerReportError,
    FormatError,
    MalformedDirective,
    ExpressionError,
)
from .format import Format, FormatConfig, ValueEvaluator
from .reports import (
    FormatTransactions,
    FormatAccount,
    FormatEquity,
    ReportGenerator,
)

__version__ = '0.1.0'

__all__ = [
    'configure_logging',
    'LedgerReportError',
    'FormatError',
    'MalformedDirective',
    'ExpressionError',
    'Format',
    'FormatConfig',
    'ValueEvaluator',
    'FormatTransactions',
    'FormatAccount',
    'FormatEquity',
    'ReportGenerator',
]
