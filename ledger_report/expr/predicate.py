# Path: ledger_report/expr/predicate.py
"""
Display Predicate

Filters accounts for account-tree reports. A predicate is built from
an expression string (compiled once), a plain callable, or nothing at
all, in which case every account matches.
"""

from typing import Callable, Optional, Union

from ..model.account import Account
from ..model.details import Details
from .compiler import ValueExpr, compile_expression


PredicateSpec = Union[None, str, Callable[[Account], bool]]


class ItemPredicate:
    """
    Boolean filter over accounts.

    Example:
        predicate = ItemPredicate('/^Expenses/ & T > 100')
        predicate.matches(account)
    """

    def __init__(
        self,
        spec: PredicateSpec = None,
        compiler: Callable[[str], ValueExpr] = compile_expression
    ):
        """
        Initialize predicate.

        Args:
            spec: Expression text, callable, or None/'' for match-all
            compiler: Expression compiler used for text specs

        Raises:
            ExpressionError: If the expression text does not compile
        """
        self._func: Optional[Callable[[Account], bool]] = None
        self._expr: Optional[ValueExpr] = None

        if callable(spec):
            self._func = spec
        elif spec:
            self._expr = compiler(spec)

    def matches(self, account: Account) -> bool:
        if self._func is not None:
            return bool(self._func(account))
        if self._expr is not None:
            return bool(self._expr.compute(Details.for_account(account)))
        return True

    __call__ = matches

    def __repr__(self) -> str:
        if self._expr is not None:
            return f"ItemPredicate({self._expr.text!r})"
        if self._func is not None:
            return f"ItemPredicate({self._func!r})"
        return "ItemPredicate(None)"


__all__ = ['ItemPredicate', 'PredicateSpec']
