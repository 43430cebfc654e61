# Path: ledger_report/tests/unit/test_format/test_truncate.py
"""
Unit Tests for format/truncate.py

Tests text fitting and partial account names.
"""

from ledger_report.constants import TruncationPolicy
from ledger_report.format.truncate import partial_account_name, truncated
from ledger_report.model import Account


class TestTruncated:
    """Test truncated()."""

    def test_fitting_text_unchanged(self):
        assert truncated('Food', 10) == 'Food'

    def test_exact_fit_unchanged(self):
        assert truncated('Groceries', 9) == 'Groceries'

    def test_zero_width_disables(self):
        assert truncated('Groceries', 0) == 'Groceries'

    def test_keep_head(self):
        result = truncated('Groceries', 6)

        assert result == 'Groc..'
        assert len(result) == 6

    def test_keep_tail(self):
        result = truncated('Expenses:Groceries', 8, TruncationPolicy.KEEP_TAIL)

        assert result == '..ceries'
        assert len(result) == 8

    def test_width_too_small_for_marker(self):
        assert truncated('Groceries', 2) == 'Gr'
        assert truncated('Groceries', 1) == 'G'


class TestPartialAccountName:
    """Test partial_account_name()."""

    def test_top_level_account(self):
        master = Account()
        assets = master.find_account('Assets')

        assert partial_account_name(assets) == 'Assets'

    def test_undisplayed_ancestors_included(self):
        master = Account()
        checking = master.find_account('Assets:Bank:Checking')

        assert partial_account_name(checking) == 'Assets:Bank:Checking'

    def test_stops_at_displayed_ancestor(self):
        master = Account()
        checking = master.find_account('Assets:Bank:Checking')
        master.find_account('Assets').displayed = True

        assert partial_account_name(checking) == 'Bank:Checking'

    def test_nearest_displayed_ancestor_wins(self):
        master = Account()
        checking = master.find_account('Assets:Bank:Checking')
        master.find_account('Assets').displayed = True
        master.find_account('Assets:Bank').displayed = True

        assert partial_account_name(checking) == 'Checking'

    def test_master_account_is_empty(self):
        assert partial_account_name(Account()) == ''

    def test_detached_account_named_in_full(self):
        account = Account('Equity:Opening Balances')

        assert partial_account_name(account) == 'Equity:Opening Balances'
