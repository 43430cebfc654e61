# Path: ledger_report/expr/compiler.py
"""
Value Expression Compiler

Compiles short value expressions into ValueExpr objects that compute a
Balance against a Details context. Expressions are compiled once (when
a format or predicate is built) and computed many times.

Grammar (lowest precedence first):
    expr       := and_expr ('|' and_expr)*
    and_expr   := comparison ('&' comparison)*
    comparison := sum (('<' | '<=' | '>' | '>=' | '=' | '==' | '!=') sum)?
    sum        := product (('+' | '-') product)*
    product    := unary (('*' | '/') unary)*
    unary      := ('-' | '!') unary | primary
    primary    := NUMBER | IDENT | '/' REGEX '/' | '(' expr ')'

Identifiers:
    a   amount of the transaction, or value of the account
    c   cost of the transaction (amount when unpriced)
    T   running total of the transaction, or total of the account
    l   depth of the account

A /regex/ term is 1 when the account's full name matches, else 0.
Comparisons and logic use the scalar quantity of each side and
produce 1 or 0.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from ..core.logger.ipo_logging import get_input_logger
from ..errors import ExpressionError
from ..model.amount import Balance
from ..model.details import Details


logger = get_input_logger('expr_compiler')

NUMBER_PATTERN = re.compile(r'\d+(?:\.\d+)?|\.\d+')
COMPARISON_OPERATORS = ('<=', '>=', '==', '!=', '<', '>', '=')


# ==============================================================================
# TERMS
# ==============================================================================

def _amount(details: Details) -> Balance:
    if details.xact is not None:
        return Balance([details.xact.amount])
    if details.account is not None:
        return details.account.value.copy()
    return Balance()


def _cost(details: Details) -> Balance:
    xact = details.xact
    if xact is not None:
        return Balance([xact.cost if xact.cost is not None else xact.amount])
    return _amount(details)


def _total(details: Details) -> Balance:
    if details.xact is not None:
        return details.xact.total.copy()
    if details.account is not None:
        return details.account.total
    return Balance()


def _depth(details: Details) -> Balance:
    if details.account is not None:
        return Balance.of(details.account.depth)
    return Balance()


IDENTIFIERS: dict[str, Callable[[Details], Balance]] = {
    'a': _amount,
    'c': _cost,
    'T': _total,
    'l': _depth,
}


def _truth(flag) -> Balance:
    return Balance.of(1) if flag else Balance()


# ==============================================================================
# EXPRESSION NODES
# ==============================================================================

class Node(ABC):
    """A node of a compiled expression."""

    @abstractmethod
    def evaluate(self, details: Details) -> Balance:
        """Compute this node against a context."""


@dataclass
class Constant(Node):
    value: Decimal

    def evaluate(self, details: Details) -> Balance:
        return Balance.of(self.value)


@dataclass
class Term(Node):
    name: str

    def evaluate(self, details: Details) -> Balance:
        return IDENTIFIERS[self.name](details)


@dataclass
class AccountMatch(Node):
    pattern: re.Pattern

    def evaluate(self, details: Details) -> Balance:
        if details.account is None:
            return _truth(False)
        found = self.pattern.search(details.account.fullname)
        return _truth(found)


@dataclass
class Unary(Node):
    op: str
    operand: Node

    def evaluate(self, details: Details) -> Balance:
        value = self.operand.evaluate(details)
        if self.op == '-':
            return -value
        return _truth(not value)


@dataclass
class Binary(Node):
    op: str
    left: Node
    right: Node

    def evaluate(self, details: Details) -> Balance:
        if self.op == '&':
            if not self.left.evaluate(details):
                return _truth(False)
            return _truth(self.right.evaluate(details))
        if self.op == '|':
            if self.left.evaluate(details):
                return _truth(True)
            return _truth(self.right.evaluate(details))

        left = self.left.evaluate(details)
        right = self.right.evaluate(details)

        if self.op in COMPARISON_OPERATORS:
            return _truth(_compare(self.op, left.quantity, right.quantity))

        try:
            if self.op == '+':
                return left + right
            if self.op == '-':
                return left - right
            if self.op == '*':
                return left * right
            return left / right
        except ZeroDivisionError as e:
            raise ExpressionError(str(e)) from e
        except ValueError as e:
            raise ExpressionError(str(e)) from e


def _compare(op: str, left: Decimal, right: Decimal) -> bool:
    if op == '<':
        return left < right
    if op == '<=':
        return left <= right
    if op == '>':
        return left > right
    if op == '>=':
        return left >= right
    if op == '!=':
        return left != right
    return left == right


class ValueExpr:
    """
    A compiled value expression.

    Example:
        expr = compile_expression('a * 2')
        expr.compute(Details.for_transaction(xact))
    """

    def __init__(self, text: str, root: Node):
        self.text = text
        self._root = root

    def compute(self, details: Details) -> Balance:
        """
        Evaluate against a context.

        Raises:
            ExpressionError: On division by zero or invalid arithmetic
        """
        try:
            return self._root.evaluate(details)
        except ExpressionError as e:
            if not e.expression:
                e.expression = self.text
            raise

    def __repr__(self) -> str:
        return f"ValueExpr({self.text!r})"


# ==============================================================================
# PARSER
# ==============================================================================

class _Parser:
    """Recursive-descent parser over one expression string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def parse(self) -> Node:
        node = self._or()
        self._skip_space()
        if self.pos < len(self.text):
            self._fail(f"Unexpected {self.text[self.pos]!r}")
        return node

    def _fail(self, message: str):
        raise ExpressionError(
            f"{message} at offset {self.pos} in expression {self.text!r}",
            expression=self.text,
        )

    def _skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def _accept(self, *ops: str) -> str:
        """Consume and return the first operator found, or ''."""
        self._skip_space()
        for op in ops:
            if self.text.startswith(op, self.pos):
                self.pos += len(op)
                return op
        return ''

    def _or(self) -> Node:
        node = self._and()
        while self._accept('|'):
            node = Binary('|', node, self._and())
        return node

    def _and(self) -> Node:
        node = self._comparison()
        while self._accept('&'):
            node = Binary('&', node, self._comparison())
        return node

    def _comparison(self) -> Node:
        node = self._sum()
        op = self._accept(*COMPARISON_OPERATORS)
        if op:
            node = Binary(op, node, self._sum())
        return node

    def _sum(self) -> Node:
        node = self._product()
        while True:
            op = self._accept('+', '-')
            if not op:
                return node
            node = Binary(op, node, self._product())

    def _product(self) -> Node:
        node = self._unary()
        while True:
            op = self._accept('*', '/')
            if not op:
                return node
            node = Binary(op, node, self._unary())

    def _unary(self) -> Node:
        # '!=' is a comparison, never a prefix
        self._skip_space()
        if self.text.startswith('!=', self.pos):
            self._fail("Missing operand")
        op = self._accept('-', '!')
        if op:
            return Unary(op, self._unary())
        return self._primary()

    def _primary(self) -> Node:
        self._skip_space()
        if self.pos >= len(self.text):
            self._fail("Missing operand")

        char = self.text[self.pos]

        if char == '(':
            self.pos += 1
            node = self._or()
            if not self._accept(')'):
                self._fail("Missing ')'")
            return node

        if char == '/':
            return self._regex()

        match = NUMBER_PATTERN.match(self.text, self.pos)
        if match:
            self.pos = match.end()
            return Constant(Decimal(match.group()))

        if char in IDENTIFIERS:
            self.pos += 1
            return Term(char)

        self._fail(f"Unknown term {char!r}")

    def _regex(self) -> Node:
        start = self.pos + 1
        end = self.text.find('/', start)
        if end < 0:
            self._fail("Missing closing '/'")
        try:
            pattern = re.compile(self.text[start:end], re.IGNORECASE)
        except re.error as e:
            self._fail(f"Bad regex: {e}")
        self.pos = end + 1
        return AccountMatch(pattern)


def compile_expression(text: str) -> ValueExpr:
    """
    Compile a value expression.

    Args:
        text: Expression source (e.g., 'a', 'T', '/^Expenses/ & a > 10')

    Returns:
        Compiled ValueExpr

    Raises:
        ExpressionError: If the text is not a valid expression
    """
    root = _Parser(text).parse()
    logger.debug(f"Compiled value expression {text!r}")
    return ValueExpr(text, root)


__all__ = ['ValueExpr', 'compile_expression', 'IDENTIFIERS']
