# Path: ledger_report/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for ledger_report

Provides a small sample ledger, format configuration helpers and
environment fixtures used across all test modules.
"""

import logging
import os
import sys
from datetime import datetime
from decimal import Decimal
from io import StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ledger_report.format.config import FormatConfig
from ledger_report.format.evaluator import ValueEvaluator
from ledger_report.model import Account, Amount, Entry, EntryState, Transaction
from ledger_report.reports.walk import SumAccounts, walk_entries


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars():
    """Provide mock environment variables for testing."""
    env_vars = {
        'LEDGER_REPORT_ENVIRONMENT': 'test',
        'LEDGER_REPORT_DEBUG': 'true',
        'LEDGER_REPORT_DATE_FORMAT': '%d.%m.%Y',
        'LEDGER_REPORT_VALUE_EXPR': 'a',
        'LEDGER_REPORT_TOTAL_EXPR': 'T',
        'LEDGER_REPORT_LINE_WIDTH': '60',
        'LEDGER_REPORT_BALANCE_FORMAT': '%12T %-A\\n',
        'LEDGER_REPORT_LOG_LEVEL': 'DEBUG',
        'LEDGER_REPORT_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def reset_singletons():
    """Reset the ConfigLoader singleton between tests."""
    from ledger_report.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


@pytest.fixture
def capture_logs():
    """Capture log output for testing."""
    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    old_level = root_logger.level
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    yield log_capture

    root_logger.removeHandler(handler)
    root_logger.setLevel(old_level)


# ==============================================================================
# FORMAT CONFIGURATION FIXTURES
# ==============================================================================

@pytest.fixture
def format_config():
    """FormatConfig with value 'a' and total 'T'."""
    return FormatConfig(evaluator=ValueEvaluator.from_strings('a', 'T'))


@pytest.fixture
def bare_config():
    """FormatConfig with no value or total expression."""
    return FormatConfig()


# ==============================================================================
# SAMPLE LEDGER FIXTURES
# ==============================================================================

def make_entry(master, date, payee, postings, state=EntryState.UNCLEARED, code=''):
    """Build an entry from (account path, amount text) pairs."""
    entry = Entry(date=date, payee=payee, code=code, state=state)
    for path, amount in postings:
        entry.add_transaction(
            Transaction(master.find_account(path), Amount.parse(amount))
        )
    return entry


@pytest.fixture
def master():
    """Empty master account."""
    return Account()


@pytest.fixture
def sample_entries(master):
    """
    Three balanced entries.

    Resulting account values:
        Assets:Checking  $1958.00
        Expenses:Food      $42.00
        Expenses:Rent    $1000.00
        Income:Salary   $-3000.00
    """
    entries = [
        make_entry(master, datetime(2024, 1, 5), 'Grocer', [
            ('Expenses:Food', '$42.00'),
            ('Assets:Checking', '$-42.00'),
        ], state=EntryState.CLEARED, code='101'),
        make_entry(master, datetime(2024, 1, 10), 'Landlord', [
            ('Expenses:Rent', '$1000.00'),
            ('Assets:Checking', '$-1000.00'),
        ]),
        make_entry(master, datetime(2024, 1, 15), 'Employer', [
            ('Assets:Checking', '$3000.00'),
            ('Income:Salary', '$-3000.00'),
        ]),
    ]
    summer = SumAccounts()
    walk_entries(entries, summer)
    summer.flush()
    return entries


@pytest.fixture
def food_account():
    """Standalone Expenses:Food account holding 42.00."""
    master = Account()
    food = master.find_account('Expenses:Food')
    food.value = food.value + Amount(Decimal('42.00'))
    return food


class FlushCountingStream(StringIO):
    """StringIO that counts flush() calls."""

    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


@pytest.fixture
def counting_stream():
    return FlushCountingStream()
