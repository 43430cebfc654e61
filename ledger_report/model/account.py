# Path: ledger_report/model/account.py
"""
Account Tree

Each account holds the balance of its own postings (value) and knows
its parent and children. The master account is a parentless node with
an empty name; its children are the top-level accounts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from ..constants import ACCOUNT_SEPARATOR
from .amount import Balance


@dataclass(eq=False)
class Account:
    """
    A node in the account tree.

    Attributes:
        name: Name of this segment (e.g., 'Food' in 'Expenses:Food')
        parent: Parent account, None for the master account
        children: Sub-accounts keyed by segment name
        value: Balance of postings made directly to this account
        displayed: Set by report drivers once the account is rendered

    Example:
        master = Account()
        food = master.find_account('Expenses:Food')
        food.fullname           # 'Expenses:Food'
    """
    name: str = ''
    parent: Optional[Account] = field(default=None, repr=False)
    children: dict[str, Account] = field(default_factory=dict, repr=False)
    value: Balance = field(default_factory=Balance)
    displayed: bool = False

    def __post_init__(self):
        if self.parent is not None:
            self.parent.add_account(self)

    # ===========================================================================
    # TREE NAVIGATION
    # ===========================================================================
    def add_account(self, child: Account) -> None:
        """
        Attach a child account.

        Raises:
            ValueError: If the child is this account or an ancestor of it
        """
        if child is self:
            raise ValueError("Cannot add account as its own child")
        current = self.parent
        while current is not None:
            if current is child:
                raise ValueError("Adding this account would create a cycle")
            current = current.parent

        child.parent = self
        self.children[child.name] = child

    def find_account(
        self,
        path: str,
        auto_create: bool = True
    ) -> Optional[Account]:
        """
        Look up a descendant by colon-separated path.

        Args:
            path: Path relative to this account (e.g., 'Assets:Checking')
            auto_create: Create missing segments instead of returning None

        Returns:
            The account, or None if missing and auto_create is False
        """
        account = self
        for segment in path.split(ACCOUNT_SEPARATOR):
            child = account.children.get(segment)
            if child is None:
                if not auto_create:
                    return None
                child = Account(segment, parent=account)
            account = child
        return account

    def sorted_children(self) -> list[Account]:
        """Children in name order."""
        return [self.children[name] for name in sorted(self.children)]

    def ancestors(self) -> Iterator[Account]:
        """Parents from the nearest up to the master account."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    # ===========================================================================
    # DERIVED PROPERTIES
    # ===========================================================================
    @property
    def fullname(self) -> str:
        """Colon-joined names from the top-level account down."""
        names = [self.name] + [a.name for a in self.ancestors()]
        return ACCOUNT_SEPARATOR.join(n for n in reversed(names) if n)

    @property
    def depth(self) -> int:
        """Number of ancestors (0 for the master account)."""
        return sum(1 for _ in self.ancestors())

    @property
    def total(self) -> Balance:
        """Value of this account plus every descendant."""
        result = Balance()
        stack = [self]
        while stack:
            account = stack.pop()
            result += account.value
            stack.extend(account.children.values())
        return result


__all__ = ['Account']
