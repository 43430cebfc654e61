# Path: ledger_report/reports/base_handler.py
"""
Base Report Handler

Every report driver and every chained walker step implements the same
two-method interface: visit() once per item, flush() once at the end.
Walkers in reports.walk feed items to any handler without knowing
which report it produces.

To add a new report:
1. Subclass ReportHandler
2. Implement visit() and flush()
3. Drive it with one of the walk_* functions
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


Item = TypeVar('Item')


class ReportHandler(ABC, Generic[Item]):
    """Stateful visitor over a stream of ledger items."""

    @abstractmethod
    def visit(self, item: Item) -> None:
        """Process one item."""

    @abstractmethod
    def flush(self) -> None:
        """Finish the traversal (write trailers, flush output)."""


class ChainedHandler(ReportHandler[Item]):
    """
    Handler that does some work per item, then hands it on.

    Subclasses override visit() and call super().visit(item) to pass
    the item to the next handler.
    """

    def __init__(self, handler: ReportHandler[Item]):
        self.handler = handler

    def visit(self, item: Item) -> None:
        self.handler.visit(item)

    def flush(self) -> None:
        self.handler.flush()


__all__ = ['ReportHandler', 'ChainedHandler']
