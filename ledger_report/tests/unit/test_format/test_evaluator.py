# Path: ledger_report/tests/unit/test_format/test_evaluator.py
"""
Unit Tests for format/evaluator.py and format/config.py

Tests value/total dispatch and building FormatConfig from ConfigLoader.
"""

from decimal import Decimal

import pytest

from ledger_report.config_loader import ConfigLoader
from ledger_report.errors import ExpressionError
from ledger_report.format.config import FormatConfig
from ledger_report.format.evaluator import ValueEvaluator
from ledger_report.model import Balance, Details


class TestValueEvaluator:
    """Test ValueEvaluator."""

    def test_unset_expressions_compute_nothing(self, food_account):
        evaluator = ValueEvaluator()
        details = Details.for_account(food_account)

        assert evaluator.compute_value(details) is None
        assert evaluator.compute_total(details) is None

    def test_empty_strings_leave_unset(self):
        evaluator = ValueEvaluator.from_strings('', '')

        assert evaluator.value_expr is None
        assert evaluator.total_expr is None

    def test_value_and_total(self, food_account):
        evaluator = ValueEvaluator.from_strings('a', 'T')

        parent = Details.for_account(food_account.parent)

        assert evaluator.compute_value(parent) == Balance()
        assert evaluator.compute_total(parent) == Decimal('42.00')

    def test_only_total_set(self, food_account):
        evaluator = ValueEvaluator.from_strings(total='T * 2')
        details = Details.for_account(food_account)

        assert evaluator.compute_value(details) is None
        assert evaluator.compute_total(details) == Decimal('84.00')

    def test_bad_expression_raises(self):
        with pytest.raises(ExpressionError):
            ValueEvaluator.from_strings('a +', 'T')

    def test_repr_names_expressions(self):
        evaluator = ValueEvaluator.from_strings('a', 'T')

        assert "'a'" in repr(evaluator)
        assert "'T'" in repr(evaluator)


class TestFormatConfig:
    """Test FormatConfig construction."""

    def test_defaults(self):
        config = FormatConfig()

        assert config.date_format == '%Y/%m/%d'
        assert config.line_width == 80
        assert config.evaluator.value_expr is None

    def test_from_loader(self, mock_env_vars, reset_singletons):
        config = FormatConfig.from_loader(ConfigLoader())

        assert config.date_format == '%d.%m.%Y'
        assert config.line_width == 60
        assert config.evaluator.value_expr.text == 'a'
        assert config.evaluator.total_expr.text == 'T'
