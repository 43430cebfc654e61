# Path: ledger_report/format/elements.py
"""
Format Elements

A compiled format string is a tuple of FormatElement values in source
order. Elements are immutable; a Format may be rendered any number of
times and shared between reports.
"""

from dataclasses import dataclass
from typing import Optional

from ..constants import ElementKind
from ..expr.compiler import ValueExpr


@dataclass(frozen=True)
class FormatElement:
    """
    One renderable piece of a format string.

    Attributes:
        kind: What the element renders
        align_left: Pad on the right instead of the left
        min_width: Pad shorter output to this width (0 = no minimum)
        max_width: Truncate longer output to this width (0 = no maximum)
        text: Literal text, or the strftime pattern of a DATE element
        expression: Compiled expression of an EXPRESSION element
    """
    kind: ElementKind
    align_left: bool = False
    min_width: int = 0
    max_width: int = 0
    text: str = ''
    expression: Optional[ValueExpr] = None

    @classmethod
    def literal(cls, text: str) -> 'FormatElement':
        return cls(ElementKind.LITERAL, text=text)


__all__ = ['FormatElement']
