# Path: ledger_report/tests/unit/test_model/test_account_tree.py
"""
Unit Tests for model/account.py and model/journal.py

Tests account tree navigation, derived totals and entry grouping.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from ledger_report.model import (
    Account,
    Amount,
    Balance,
    Details,
    Entry,
    EntryState,
    Transaction,
)


class TestAccountTree:
    """Test tree construction and lookup."""

    def test_find_creates_missing_segments(self):
        master = Account()
        food = master.find_account('Expenses:Food')

        assert food.name == 'Food'
        assert food.parent.name == 'Expenses'
        assert food.parent.parent is master
        assert 'Expenses' in master.children

    def test_find_returns_existing(self):
        master = Account()
        food = master.find_account('Expenses:Food')

        assert master.find_account('Expenses:Food') is food

    def test_find_without_create(self):
        master = Account()

        assert master.find_account('Nope:Missing', auto_create=False) is None

    def test_fullname(self):
        master = Account()

        assert master.find_account('Assets:Bank:Checking').fullname == 'Assets:Bank:Checking'
        assert master.fullname == ''

    def test_depth(self):
        master = Account()

        assert master.depth == 0
        assert master.find_account('Assets:Bank').depth == 2

    def test_sorted_children(self):
        master = Account()
        for name in ('Liabilities', 'Assets', 'Expenses'):
            master.find_account(name)

        assert [a.name for a in master.sorted_children()] == [
            'Assets', 'Expenses', 'Liabilities'
        ]

    def test_parent_in_constructor_attaches(self):
        master = Account()
        child = Account('Cash', parent=master)

        assert master.children['Cash'] is child

    def test_cannot_add_self(self):
        account = Account('A')

        with pytest.raises(ValueError):
            account.add_account(account)

    def test_cannot_add_ancestor(self):
        master = Account()
        leaf = master.find_account('A:B:C')

        with pytest.raises(ValueError):
            leaf.add_account(master.find_account('A'))


class TestAccountTotals:
    """Test value and total."""

    def test_total_sums_descendants(self):
        master = Account()
        master.find_account('Expenses').value = Balance.of(Decimal('1'))
        master.find_account('Expenses:Food').value = Balance.of(Decimal('2'))
        master.find_account('Expenses:Food:Fruit').value = Balance.of(Decimal('3'))

        assert master.find_account('Expenses').total == 6
        assert master.find_account('Expenses:Food').total == 5
        assert master.total == 6

    def test_total_of_empty_tree(self):
        assert not Account().total

    def test_deep_tree_total(self):
        master = Account()
        leaf = master.find_account(':'.join(f'L{i}' for i in range(2000)))
        leaf.value = Balance.of(7)

        assert master.total == 7
        assert leaf.depth == 2000


class TestEntries:
    """Test Entry and Transaction."""

    def test_add_transaction_sets_entry(self):
        master = Account()
        entry = Entry(datetime(2024, 1, 5), 'Grocer', state=EntryState.CLEARED)
        xact = entry.add_transaction(
            Transaction(master.find_account('Cash'), Amount.parse('$-5'))
        )

        assert xact.entry is entry
        assert entry.transactions == [xact]

    def test_entry_balance(self):
        master = Account()
        entry = Entry(payee='Broker')
        entry.add_transaction(Transaction(
            master.find_account('Assets:Broker'),
            Amount.parse('10 AAPL'),
            cost=Amount.parse('$1500'),
        ))
        entry.add_transaction(
            Transaction(master.find_account('Assets:Cash'), Amount.parse('$-1500'))
        )

        assert not entry.balance

    def test_details_for_transaction(self):
        master = Account()
        entry = Entry(payee='Grocer')
        xact = entry.add_transaction(
            Transaction(master.find_account('Cash'), Amount.parse('$-5'))
        )

        details = Details.for_transaction(xact)

        assert details.entry is entry
        assert details.xact is xact
        assert details.account is xact.account
