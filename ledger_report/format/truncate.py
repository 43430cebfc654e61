# Path: ledger_report/format/truncate.py
"""
Text Fitting Utilities

truncated() shortens text to a width with a visible '..' marker.
partial_account_name() builds the account name shown by %n/%a, which
starts below the nearest ancestor already shown in the report.
"""

from ..constants import (
    ACCOUNT_SEPARATOR,
    TRUNCATION_MARKER,
    TruncationPolicy,
)
from ..model.account import Account


def truncated(
    text: str,
    width: int,
    policy: TruncationPolicy = TruncationPolicy.KEEP_HEAD
) -> str:
    """
    Fit text into width characters.

    Args:
        text: Text to shorten
        width: Maximum length; 0 disables truncation
        policy: Keep the head ('Groceri..') or the tail ('..:Groceries')

    Returns:
        text unchanged if it fits, else exactly width characters
        including the marker
    """
    if width <= 0 or len(text) <= width:
        return text
    if width <= len(TRUNCATION_MARKER):
        return text[:width]

    keep = width - len(TRUNCATION_MARKER)
    if policy is TruncationPolicy.KEEP_TAIL:
        return TRUNCATION_MARKER + text[-keep:]
    return text[:keep] + TRUNCATION_MARKER


def partial_account_name(account: Account) -> str:
    """
    Name of an account relative to its last displayed ancestor.

    Walks up from the account, collecting segment names until reaching
    an account already marked displayed or the master account. An
    account whose parent was collapsed away therefore carries the
    parent's segment ('Assets:Checking' under a hidden 'Assets').

    A detached account (no parent, such as the equity counter account)
    is named in full.
    """
    if account.parent is None:
        return account.name

    names = []
    current = account
    while current is not None and current.parent is not None:
        if current.displayed:
            break
        names.append(current.name)
        current = current.parent
    return ACCOUNT_SEPARATOR.join(reversed(names))


__all__ = ['truncated', 'partial_account_name']
