# Path: ledger_report/errors.py
"""
Error Types for ledger_report

Parse-time errors abort construction of a Format. Render-time errors
propagate out of the render call; output already written stays written.

Hierarchy:
    LedgerReportError
    +-- FormatError
    |   `-- MalformedDirective
    `-- ExpressionError
"""

from typing import Optional


class LedgerReportError(Exception):
    """Base class for all ledger_report errors."""


class FormatError(LedgerReportError):
    """A format string could not be compiled."""


class MalformedDirective(FormatError):
    """
    A directive in a format string is invalid.

    Raised for an unknown kind code, a trailing '%' with no kind,
    or an unterminated '(...)' / '[...]' block.

    Attributes:
        format_string: The format string being compiled
        position: Offset of the offending directive's '%'
    """

    def __init__(
        self,
        message: str,
        format_string: str = '',
        position: Optional[int] = None
    ):
        super().__init__(message)
        self.format_string = format_string
        self.position = position

    def __str__(self) -> str:
        base = super().__str__()
        if self.position is None:
            return base
        return f"{base} (at offset {self.position} in {self.format_string!r})"


class ExpressionError(LedgerReportError):
    """
    A value expression failed to compile or evaluate.

    Attributes:
        expression: Source text of the expression, when known
    """

    def __init__(self, message: str, expression: str = ''):
        super().__init__(message)
        self.expression = expression


__all__ = [
    'LedgerReportError',
    'FormatError',
    'MalformedDirective',
    'ExpressionError',
]
