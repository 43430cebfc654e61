# Path: ledger_report/tests/unit/test_model/test_amount.py
"""
Unit Tests for model/amount.py

Tests Amount parsing and display, and Balance arithmetic.
"""

from decimal import Decimal

import pytest

from ledger_report.model.amount import Amount, Balance


class TestAmountParse:
    """Test Amount.parse()."""

    @pytest.mark.parametrize('text,quantity,commodity', [
        ('$42.00', Decimal('42.00'), '$'),
        ('$-42.00', Decimal('-42.00'), '$'),
        ('-$12.50', Decimal('-12.50'), '$'),
        ('10 AAPL', Decimal('10'), 'AAPL'),
        ('-3 EUR', Decimal('-3'), 'EUR'),
        ('1,250.75', Decimal('1250.75'), ''),
        ('.5', Decimal('.5'), ''),
    ])
    def test_parse(self, text, quantity, commodity):
        amount = Amount.parse(text)

        assert amount.quantity == quantity
        assert amount.commodity == commodity

    @pytest.mark.parametrize('text', ['', 'abc', '$', '$5 EUR'])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            Amount.parse(text)


class TestAmountDisplay:
    """Test str(Amount)."""

    def test_prefix_commodity(self):
        assert str(Amount(Decimal('42.00'), '$')) == '$42.00'

    def test_negative_prefix_commodity(self):
        assert str(Amount(Decimal('-42.00'), '$')) == '$-42.00'

    def test_suffix_commodity(self):
        assert str(Amount(Decimal('10'), 'AAPL')) == '10 AAPL'

    def test_plain_number(self):
        assert str(Amount(Decimal('3.50'))) == '3.50'


class TestAmountArithmetic:
    """Test Amount operators."""

    def test_add_same_commodity(self):
        result = Amount.parse('$1.50') + Amount.parse('$2.25')

        assert result == Amount(Decimal('3.75'), '$')

    def test_add_mismatched_commodity(self):
        with pytest.raises(ValueError):
            Amount.parse('$1') + Amount.parse('1 EUR')

    def test_negate_and_subtract(self):
        assert -Amount.parse('$5') == Amount.parse('$-5')
        assert Amount.parse('$5') - Amount.parse('$2') == Amount.parse('$3')

    def test_is_zero(self):
        assert Amount(Decimal('0.00'), '$').is_zero()
        assert not Amount.parse('$0.01').is_zero()


class TestBalance:
    """Test Balance."""

    def test_empty_balance(self):
        balance = Balance()

        assert not balance
        assert balance.format_lines() == ['0']
        assert balance == 0

    def test_zero_quantities_dropped(self):
        balance = Balance([Amount.parse('$10'), Amount.parse('$-10')])

        assert not balance
        assert balance.amounts() == []

    def test_multi_commodity_sorted(self):
        balance = Balance([Amount.parse('5 EUR'), Amount.parse('$10')])

        assert balance.format_lines() == ['$10', '5 EUR']
        assert str(balance) == '$10\n5 EUR'

    def test_in_place_add(self):
        balance = Balance([Amount.parse('$10'), Amount.parse('5 EUR')])
        balance += Amount.parse('$-10')

        assert str(balance) == '5 EUR'

    def test_add_returns_new_balance(self):
        left = Balance([Amount.parse('$1')])
        result = left + Balance([Amount.parse('$2')])

        assert result == Amount.parse('$3')
        assert left == Amount.parse('$1')

    def test_negate(self):
        balance = -Balance([Amount.parse('$3'), Amount.parse('2 EUR')])

        assert balance.format_lines() == ['$-3', '-2 EUR']

    def test_subtract(self):
        result = Balance([Amount.parse('$3')]) - Amount.parse('$1')

        assert result == Amount.parse('$2')

    def test_multiply_by_plain_number(self):
        balance = Balance([Amount.parse('$3')]) * 2

        assert balance == Amount.parse('$6')

    def test_plain_balance_scales_commodity_balance(self):
        result = Balance.of(2) * Balance([Amount.parse('$3')])

        assert result == Amount.parse('$6')

    def test_multiply_two_commodity_balances(self):
        with pytest.raises(ValueError):
            Balance([Amount.parse('$3')]) * Balance([Amount.parse('2 EUR')])

    def test_divide(self):
        result = Balance([Amount.parse('$9')]) / Balance.of(3)

        assert result == Amount.parse('$3')

    def test_divide_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Balance.of(1) / Balance()

    def test_quantity_sums_commodities(self):
        balance = Balance([Amount.parse('$3'), Amount.parse('2 EUR')])

        assert balance.quantity == Decimal('5')
        assert not balance.is_plain()

    def test_copy_is_independent(self):
        balance = Balance.of(1)
        copy = balance.copy()
        copy += Amount(Decimal('1'))

        assert balance == 1
        assert copy == 2

    def test_repr(self):
        assert repr(Balance([Amount.parse('$3')])) == 'Balance($3)'
