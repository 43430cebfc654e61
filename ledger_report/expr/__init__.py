# Path: ledger_report/expr/__init__.py
"""
Value Expressions

Compiler for the small value-expression language used by embedded
%(...) directives, the value/total settings and display predicates.
"""

from .compiler import ValueExpr, compile_expression
from .predicate import ItemPredicate

__all__ = [
    'ValueExpr',
    'compile_expression',
    'ItemPredicate',
]
