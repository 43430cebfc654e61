# Path: ledger_report/format/config.py
"""
Format Configuration

FormatConfig bundles everything a Format needs besides its own string:
the value/total evaluator, the date pattern, the line width used by
spacers, the expression compiler and the truncation function. It is
passed to each Format explicitly; nothing is read from module state.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from ..config_loader import ConfigLoader
from ..constants import DEFAULT_DATE_FORMAT, DEFAULT_LINE_WIDTH
from ..expr.compiler import ValueExpr, compile_expression
from .evaluator import ValueEvaluator
from .truncate import truncated


@dataclass(frozen=True)
class FormatConfig:
    """
    Rendering settings shared by the formats of one report run.

    Attributes:
        evaluator: Value/total expressions for %t and %T
        date_format: strftime pattern for %d
        line_width: Column a width-less spacer right-justifies to
        compiler: Compiler for %(...) directives
        truncate: truncated()-compatible function for max widths
    """
    evaluator: ValueEvaluator = field(default_factory=ValueEvaluator)
    date_format: str = DEFAULT_DATE_FORMAT
    line_width: int = DEFAULT_LINE_WIDTH
    compiler: Callable[[str], ValueExpr] = compile_expression
    truncate: Callable = truncated

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None) -> 'FormatConfig':
        """
        Build from ConfigLoader settings.

        Args:
            loader: ConfigLoader instance (creates one if not provided)

        Raises:
            ExpressionError: If a configured expression does not compile
        """
        loader = loader or ConfigLoader()
        evaluator = ValueEvaluator.from_strings(
            loader.get('value_expr', ''),
            loader.get('total_expr', ''),
        )
        return cls(
            evaluator=evaluator,
            date_format=loader.get('date_format', DEFAULT_DATE_FORMAT),
            line_width=loader.get('line_width', DEFAULT_LINE_WIDTH),
        )


__all__ = ['FormatConfig']
