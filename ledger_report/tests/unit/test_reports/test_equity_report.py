# Path: ledger_report/tests/unit/test_reports/test_equity_report.py
"""
Unit Tests for reports/equity.py

Tests FormatEquity including:
- Header written at construction
- Counter entry balancing the account lines
- Multi-commodity totals
"""

from datetime import datetime
from io import StringIO

import pytest

from ledger_report.format.renderer import Format
from ledger_report.model import Account, Amount, Balance
from ledger_report.reports.equity import FormatEquity
from ledger_report.reports.walk import walk_accounts


NOW = datetime(2024, 2, 1)


@pytest.fixture
def equity_factory(format_config):
    def factory(out, display_predicate=None, now=NOW):
        return FormatEquity(
            out,
            Format('\n%d %X%C%P\n', format_config),
            Format('%A=%t\n', format_config),
            display_predicate,
            now=now,
        )
    return factory


class TestHeader:
    """Test the opening-balances header."""

    def test_header_written_on_construction(self, equity_factory):
        out = StringIO()

        equity_factory(out)

        assert out.getvalue() == '\n2024/02/01 Opening Balances\n'

    def test_header_defaults_to_now(self, equity_factory):
        out = StringIO()

        equity_factory(out, now=None)

        assert datetime.now().strftime('%Y/') in out.getvalue()
        assert 'Opening Balances' in out.getvalue()


class TestEquityLines:
    """Test account lines and the counter entry."""

    def test_balanced_ledger_closes_to_zero(self, master, sample_entries, equity_factory):
        out = StringIO()
        handler = equity_factory(out)

        walk_accounts(master, handler)
        handler.flush()

        assert out.getvalue() == (
            '\n2024/02/01 Opening Balances\n'
            'Assets:Checking=$1958.00\n'
            'Expenses=0\n'
            'Expenses:Food=$42.00\n'
            'Expenses:Rent=$1000.00\n'
            'Income:Salary=$-3000.00\n'
            'Equity:Opening Balances=0\n'
        )
        assert not handler.total

    def test_counter_line_negates_total(self, master, sample_entries, equity_factory):
        out = StringIO()
        handler = equity_factory(out, '/^Assets|^Expenses/')

        walk_accounts(master, handler)
        handler.flush()

        assert out.getvalue().endswith(
            'Expenses:Rent=$1000.00\n'
            'Equity:Opening Balances=$-3000.00\n'
        )
        assert 'Income' not in out.getvalue()
        assert handler.total == Amount.parse('$3000.00')

    def test_multi_commodity_total(self, equity_factory):
        master = Account()
        master.find_account('Assets:Cash').value = Balance([Amount.parse('$100')])
        master.find_account('Assets:Broker').value = Balance([Amount.parse('10 AAPL')])
        out = StringIO()
        handler = equity_factory(out)

        walk_accounts(master, handler)
        handler.flush()

        assert handler.total == Balance([Amount.parse('$100'), Amount.parse('10 AAPL')])
        assert out.getvalue().endswith(
            'Equity:Opening Balances=$-100\n'
            + ' ' * 24 + '-10 AAPL\n'
        )

    def test_counter_line_partial_name(self, master, sample_entries, format_config):
        out = StringIO()
        handler = FormatEquity(
            out,
            Format('\n%d %X%C%P\n', format_config),
            Format('%a=%t\n', format_config),
            now=NOW,
        )

        walk_accounts(master, handler)
        handler.flush()

        assert out.getvalue().endswith('Equity:Opening Balances=0\n')

    def test_marks_accounts_displayed(self, master, sample_entries, equity_factory):
        walk_accounts(master, equity_factory(StringIO()))

        assert master.find_account('Expenses:Food').displayed
        assert not master.find_account('Assets').displayed


class TestFlush:
    """Test flush behaviour."""

    def test_second_flush_ignored(self, master, sample_entries, equity_factory, capture_logs):
        out = StringIO()
        handler = equity_factory(out)
        walk_accounts(master, handler)
        handler.flush()
        written = out.getvalue()

        handler.flush()

        assert out.getvalue() == written
        assert handler.flushed
        assert 'more than once' in capture_logs.getvalue()

    def test_flush_flushes_stream(self, equity_factory, counting_stream):
        handler = equity_factory(counting_stream)

        handler.flush()

        assert counting_stream.flushes == 1
