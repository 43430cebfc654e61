# Path: ledger_report/constants.py
"""
System-Wide Constants for ledger_report

Central place for directive codes, default format strings and the
fixed labels used by the report drivers.

Constants are organized by category:
- Directive syntax
- Truncation
- Default formats
- Report labels
"""

from enum import Enum
from typing import Final


# ==============================================================================
# DIRECTIVE SYNTAX
# ==============================================================================

DIRECTIVE_CHAR: Final[str] = '%'
ALIGN_LEFT_CHAR: Final[str] = '-'
MAX_WIDTH_CHAR: Final[str] = '.'

EXPRESSION_OPEN: Final[str] = '('
EXPRESSION_CLOSE: Final[str] = ')'
DATE_PATTERN_OPEN: Final[str] = '['
DATE_PATTERN_CLOSE: Final[str] = ']'


class ElementKind(Enum):
    """
    Kinds of format elements.

    LITERAL: Fixed text copied verbatim
    EXPRESSION: Embedded value expression, compiled at parse time
    DATE: Entry date through a strftime pattern
    CLEARED: Cleared/pending marker of the entry
    CODE: Entry code in parentheses
    PAYEE: Entry payee
    ACCOUNT_NAME: Account name relative to its last displayed ancestor
    ACCOUNT_PATH: Full colon-separated account name
    OPT_AMOUNT: Transaction amount, elided when implied
    VALUE: Configured value expression
    TOTAL: Configured total expression
    SPACER: Fill up to a column or to the end of the line
    """
    LITERAL = 'literal'
    EXPRESSION = 'expression'
    DATE = 'date'
    CLEARED = 'cleared'
    CODE = 'code'
    PAYEE = 'payee'
    ACCOUNT_NAME = 'account_name'
    ACCOUNT_PATH = 'account_path'
    OPT_AMOUNT = 'opt_amount'
    VALUE = 'value'
    TOTAL = 'total'
    SPACER = 'spacer'


# Single-character kind selectors. '(' and '[' are handled by the parser
# since they carry a bracketed argument.
KIND_CODES: Final[dict[str, ElementKind]] = {
    'd': ElementKind.DATE,
    'X': ElementKind.CLEARED,
    'C': ElementKind.CODE,
    'P': ElementKind.PAYEE,
    'p': ElementKind.PAYEE,
    'n': ElementKind.ACCOUNT_NAME,
    'a': ElementKind.ACCOUNT_NAME,
    'N': ElementKind.ACCOUNT_PATH,
    'A': ElementKind.ACCOUNT_PATH,
    'o': ElementKind.OPT_AMOUNT,
    't': ElementKind.VALUE,
    'T': ElementKind.TOTAL,
    '|': ElementKind.SPACER,
}

SPACER_FILL: Final[str] = ' '
CLEARED_MARKER: Final[str] = '* '
PENDING_MARKER: Final[str] = '! '


# ==============================================================================
# TRUNCATION
# ==============================================================================

TRUNCATION_MARKER: Final[str] = '..'


class TruncationPolicy(Enum):
    """Which end of an over-long value survives truncation."""
    KEEP_HEAD = 'head'
    KEEP_TAIL = 'tail'


# Account names read best from the leaf, free text from the start.
TRUNCATION_POLICIES: Final[dict[ElementKind, TruncationPolicy]] = {
    ElementKind.ACCOUNT_NAME: TruncationPolicy.KEEP_TAIL,
    ElementKind.ACCOUNT_PATH: TruncationPolicy.KEEP_TAIL,
}


# ==============================================================================
# DEFAULTS
# ==============================================================================

DEFAULT_DATE_FORMAT: Final[str] = '%Y/%m/%d'
DEFAULT_VALUE_EXPR: Final[str] = 'a'
DEFAULT_TOTAL_EXPR: Final[str] = 'T'
DEFAULT_LINE_WIDTH: Final[int] = 80

DEFAULT_BALANCE_FORMAT: Final[str] = '%20T  %-A\n'
DEFAULT_REGISTER_FORMAT: Final[str] = (
    '%d %-.20P %-.22A %12.66t %12.80T\n'
)
DEFAULT_REGISTER_NEXT_FORMAT: Final[str] = '%32|%-.22A %12.66t %12.80T\n'
DEFAULT_PRINT_FORMAT: Final[str] = (
    '\n%d %X%C%P\n    %-34A  %12o\n'
)
DEFAULT_PRINT_NEXT_FORMAT: Final[str] = '    %-34A  %12o\n'
DEFAULT_EQUITY_FORMAT: Final[str] = '\n%d %X%C%P\n'
DEFAULT_EQUITY_NEXT_FORMAT: Final[str] = '    %-34A  %12t\n'


# ==============================================================================
# REPORT LABELS
# ==============================================================================

ACCOUNT_SEPARATOR: Final[str] = ':'
OPENING_BALANCES_PAYEE: Final[str] = 'Opening Balances'
OPENING_BALANCES_ACCOUNT: Final[str] = 'Equity:Opening Balances'
BALANCE_TOTAL_SEPARATOR: Final[str] = '-' * 20 + '\n'


__all__ = [
    'DIRECTIVE_CHAR',
    'ALIGN_LEFT_CHAR',
    'MAX_WIDTH_CHAR',
    'EXPRESSION_OPEN',
    'EXPRESSION_CLOSE',
    'DATE_PATTERN_OPEN',
    'DATE_PATTERN_CLOSE',
    'ElementKind',
    'KIND_CODES',
    'SPACER_FILL',
    'CLEARED_MARKER',
    'PENDING_MARKER',
    'TRUNCATION_MARKER',
    'TruncationPolicy',
    'TRUNCATION_POLICIES',
    'DEFAULT_DATE_FORMAT',
    'DEFAULT_VALUE_EXPR',
    'DEFAULT_TOTAL_EXPR',
    'DEFAULT_LINE_WIDTH',
    'DEFAULT_BALANCE_FORMAT',
    'DEFAULT_REGISTER_FORMAT',
    'DEFAULT_REGISTER_NEXT_FORMAT',
    'DEFAULT_PRINT_FORMAT',
    'DEFAULT_PRINT_NEXT_FORMAT',
    'DEFAULT_EQUITY_FORMAT',
    'DEFAULT_EQUITY_NEXT_FORMAT',
    'ACCOUNT_SEPARATOR',
    'OPENING_BALANCES_PAYEE',
    'OPENING_BALANCES_ACCOUNT',
    'BALANCE_TOTAL_SEPARATOR',
]
