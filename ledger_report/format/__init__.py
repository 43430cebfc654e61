# Path: ledger_report/format/__init__.py
"""
Format Engine

Compiles format strings into element tuples and renders them against
a Details context.

Flow:
    format string -> parse_elements -> elements -> ElementRenderer -> text
"""

from .elements import FormatElement
from .parser import parse_elements
from .truncate import truncated, partial_account_name
from .evaluator import ValueEvaluator
from .config import FormatConfig
from .renderer import ElementRenderer, Format

__all__ = [
    'FormatElement',
    'parse_elements',
    'truncated',
    'partial_account_name',
    'ValueEvaluator',
    'FormatConfig',
    'ElementRenderer',
    'Format',
]
