# Path: ledger_report/format/evaluator.py
"""
Value/Total Evaluator

Holds the two compiled expressions behind %t and %T. Either may be
absent; an absent expression computes nothing and its elements render
empty. Expressions are fixed at construction and read many times.
"""

from typing import Callable, Optional

from ..core.logger.ipo_logging import get_process_logger
from ..expr.compiler import ValueExpr, compile_expression
from ..model.amount import Balance
from ..model.details import Details


logger = get_process_logger('evaluator')


class ValueEvaluator:
    """
    Dispatch for the configured value and total expressions.

    Example:
        evaluator = ValueEvaluator.from_strings('a', 'T')
        evaluator.compute_total(Details.for_account(account))
    """

    def __init__(
        self,
        value_expr: Optional[ValueExpr] = None,
        total_expr: Optional[ValueExpr] = None
    ):
        self._value_expr = value_expr
        self._total_expr = total_expr

    @classmethod
    def from_strings(
        cls,
        value: str = '',
        total: str = '',
        compiler: Callable[[str], ValueExpr] = compile_expression
    ) -> 'ValueEvaluator':
        """
        Compile both expressions; empty strings leave them unset.

        Raises:
            ExpressionError: If either expression does not compile
        """
        value_expr = compiler(value) if value else None
        total_expr = compiler(total) if total else None
        logger.debug(f"Value expression {value!r}, total expression {total!r}")
        return cls(value_expr, total_expr)

    @property
    def value_expr(self) -> Optional[ValueExpr]:
        return self._value_expr

    @property
    def total_expr(self) -> Optional[ValueExpr]:
        return self._total_expr

    def compute_value(self, details: Details) -> Optional[Balance]:
        """Value of the context, or None when no value expression is set."""
        if self._value_expr is None:
            return None
        return self._value_expr.compute(details)

    def compute_total(self, details: Details) -> Optional[Balance]:
        """Total of the context, or None when no total expression is set."""
        if self._total_expr is None:
            return None
        return self._total_expr.compute(details)

    def __repr__(self) -> str:
        return (
            f"ValueEvaluator(value={self._value_expr!r}, "
            f"total={self._total_expr!r})"
        )


__all__ = ['ValueEvaluator']
