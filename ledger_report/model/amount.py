# Path: ledger_report/model/amount.py
"""
Amounts and Balances

Amount is a single commodity quantity. Balance holds one quantity per
commodity and is what value expressions produce and reports print.

Only the arithmetic the report engine needs is provided: addition,
negation and scaling by a plain number. Commodity conversion and
display precision rules are left to the surrounding ledger tool.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Union


# Commodities written before the number ("$42.00"); all others follow it.
PREFIX_COMMODITIES = frozenset({'$', '£', '€', '¥'})

AMOUNT_PATTERN = re.compile(
    r'^\s*(?P<sign>-)?\s*(?P<prefix>[^\d\s.,+-]*)\s*'
    r'(?P<number>[-+]?\d[\d,]*(?:\.\d+)?|[-+]?\.\d+)\s*'
    r'(?P<suffix>[^\d\s.,+-][^\s]*)?\s*$'
)


@dataclass(frozen=True)
class Amount:
    """
    A quantity of one commodity.

    Attributes:
        quantity: Decimal quantity, scale preserved for display
        commodity: Commodity symbol, '' for a plain number

    Example:
        Amount.parse('$42.00')      # Amount(Decimal('42.00'), '$')
        Amount.parse('10 AAPL')     # Amount(Decimal('10'), 'AAPL')
    """
    quantity: Decimal
    commodity: str = ''

    @classmethod
    def parse(cls, text: str) -> Amount:
        """
        Parse an amount such as '$-12.50', '-$12.50' or '3 EUR'.

        Raises:
            ValueError: If the text is not an amount
        """
        match = AMOUNT_PATTERN.match(text)
        if not match:
            raise ValueError(f"Not an amount: {text!r}")

        prefix = match.group('prefix') or ''
        suffix = match.group('suffix') or ''
        if prefix and suffix:
            raise ValueError(f"Amount has two commodities: {text!r}")

        try:
            quantity = Decimal(match.group('number').replace(',', ''))
        except InvalidOperation as e:
            raise ValueError(f"Not an amount: {text!r}") from e

        if match.group('sign'):
            quantity = -quantity
        return cls(quantity, prefix or suffix)

    def is_zero(self) -> bool:
        return self.quantity == 0

    def __neg__(self) -> Amount:
        return Amount(-self.quantity, self.commodity)

    def __add__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        if other.commodity != self.commodity:
            raise ValueError(
                f"Cannot add {other.commodity!r} to {self.commodity!r}"
            )
        return Amount(self.quantity + other.quantity, self.commodity)

    def __sub__(self, other: Amount) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        return self + (-other)

    def __str__(self) -> str:
        number = f"{self.quantity:f}"
        if not self.commodity:
            return number
        if self.commodity in PREFIX_COMMODITIES:
            return f"{self.commodity}{number}"
        return f"{number} {self.commodity}"


Scalar = Union[int, Decimal]


class Balance:
    """
    Quantities of several commodities held together.

    Zero quantities are dropped, so two balances compare equal when
    every commodity nets to the same figure.

    Example:
        balance = Balance([Amount.parse('$10'), Amount.parse('5 EUR')])
        balance += Amount.parse('$-10')
        str(balance)                # '5 EUR'
    """

    def __init__(self, amounts: Optional[Iterable[Amount]] = None):
        self._quantities: dict[str, Decimal] = {}
        for amount in amounts or ():
            self.add_amount(amount)

    @classmethod
    def of(cls, quantity: Scalar, commodity: str = '') -> Balance:
        """Balance holding a single quantity."""
        return cls([Amount(Decimal(quantity), commodity)])

    # ===========================================================================
    # MUTATION
    # ===========================================================================
    def add_amount(self, amount: Amount) -> None:
        """Add one amount in place."""
        current = self._quantities.get(amount.commodity)
        total = amount.quantity if current is None else current + amount.quantity
        if total == 0:
            self._quantities.pop(amount.commodity, None)
        else:
            self._quantities[amount.commodity] = total

    def __iadd__(self, other: Union[Balance, Amount]) -> Balance:
        for amount in _amounts_of(other):
            self.add_amount(amount)
        return self

    # ===========================================================================
    # ARITHMETIC
    # ===========================================================================
    def __add__(self, other: Union[Balance, Amount]) -> Balance:
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: Union[Balance, Amount]) -> Balance:
        return self + (-_as_balance(other))

    def __neg__(self) -> Balance:
        return Balance(-amount for amount in self.amounts())

    def __mul__(self, other: Union[Balance, Scalar]) -> Balance:
        left, factor = self._scale_operands(other)
        return Balance(
            Amount(amount.quantity * factor, amount.commodity)
            for amount in left.amounts()
        )

    __rmul__ = __mul__

    def __truediv__(self, other: Union[Balance, Scalar]) -> Balance:
        divisor = _plain_quantity(other)
        if divisor is None:
            raise ValueError("Cannot divide by a commodity balance")
        if divisor == 0:
            raise ZeroDivisionError("Division by zero balance")
        return Balance(
            Amount(amount.quantity / divisor, amount.commodity)
            for amount in self.amounts()
        )

    def _scale_operands(self, other) -> tuple[Balance, Decimal]:
        """Pick the side to scale and the plain factor to scale it by."""
        factor = _plain_quantity(other)
        if factor is not None:
            return self, factor
        own = _plain_quantity(self)
        if own is not None:
            return _as_balance(other), own
        raise ValueError("Cannot multiply two commodity balances")

    # ===========================================================================
    # QUERIES
    # ===========================================================================
    def amounts(self) -> list[Amount]:
        """Amounts sorted by commodity."""
        return [
            Amount(self._quantities[commodity], commodity)
            for commodity in sorted(self._quantities)
        ]

    @property
    def quantity(self) -> Decimal:
        """Sum of all quantities, ignoring commodity."""
        return sum(self._quantities.values(), Decimal(0))

    def is_plain(self) -> bool:
        """True when empty or holding only commodity-less quantity."""
        return set(self._quantities) <= {''}

    def copy(self) -> Balance:
        return Balance(self.amounts())

    def format_lines(self) -> list[str]:
        """One display line per commodity; '0' for an empty balance."""
        if not self._quantities:
            return ['0']
        return [str(amount) for amount in self.amounts()]

    def __bool__(self) -> bool:
        return bool(self._quantities)

    def __eq__(self, other) -> bool:
        if isinstance(other, (int, Decimal)):
            return self == Balance.of(other)
        if isinstance(other, Amount):
            other = Balance([other])
        if not isinstance(other, Balance):
            return NotImplemented
        return self._quantities == other._quantities

    __hash__ = None

    def __str__(self) -> str:
        return '\n'.join(self.format_lines())

    def __repr__(self) -> str:
        return f"Balance({', '.join(self.format_lines())})"


def _amounts_of(value: Union[Balance, Amount]) -> list[Amount]:
    if isinstance(value, Amount):
        return [value]
    return value.amounts()


def _as_balance(value: Union[Balance, Amount, Scalar]) -> Balance:
    if isinstance(value, Balance):
        return value
    if isinstance(value, Amount):
        return Balance([value])
    return Balance.of(value)


def _plain_quantity(value) -> Optional[Decimal]:
    """Quantity of a commodity-less value, or None for commodity values."""
    if isinstance(value, (int, Decimal)):
        return Decimal(value)
    if isinstance(value, Balance) and value.is_plain():
        return value.quantity
    return None


__all__ = ['Amount', 'Balance', 'PREFIX_COMMODITIES']
