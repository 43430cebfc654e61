# Path: ledger_report/reports/equity.py
"""
Equity Conversion Report Driver

Writes a "closing the books" entry: one opening-balance line per
displayable account, then a counter line to Equity:Opening Balances
carrying the negated sum, so the generated entry balances to zero.

States:
    constructed  header entry already written
    accumulating visit() renders accounts and sums their values
    flushed      flush() wrote the counter line

The running total is a full Balance, so a ledger holding several
commodities balances per commodity.
"""

from datetime import datetime
from typing import Optional, TextIO, Union

from ..constants import OPENING_BALANCES_ACCOUNT, OPENING_BALANCES_PAYEE
from ..core.logger.ipo_logging import get_output_logger
from ..expr.predicate import ItemPredicate, PredicateSpec
from ..format.renderer import Format
from ..model.account import Account
from ..model.amount import Balance
from ..model.details import Details
from ..model.journal import Entry
from .accounts import make_predicate, should_display
from .base_handler import ReportHandler


logger = get_output_logger('format_equity')


class FormatEquity(ReportHandler[Account]):
    """
    Opening-balances report for a new period.

    The header line is written by the constructor, before any account
    is visited.

    Example:
        handler = FormatEquity(sys.stdout, first_fmt, next_fmt)
        walk_accounts(master, handler)
        handler.flush()
    """

    def __init__(
        self,
        output_stream: TextIO,
        first_line_format: Format,
        next_lines_format: Format,
        display_predicate: Union[ItemPredicate, PredicateSpec] = None,
        now: Optional[datetime] = None
    ):
        """
        Initialize the report and write its header entry.

        Args:
            output_stream: Text stream to write to
            first_line_format: Format for the header entry
            next_lines_format: Format for account and counter lines
            display_predicate: Filter for accounts
            now: Header date (defaults to the current time)
        """
        self.output_stream = output_stream
        self.first_line_format = first_line_format
        self.next_lines_format = next_lines_format
        self.disp_pred = make_predicate(display_predicate, next_lines_format)
        self.total = Balance()
        self.flushed = False

        header_entry = Entry(
            date=now or datetime.now(),
            payee=OPENING_BALANCES_PAYEE,
        )
        self.first_line_format.render(
            self.output_stream, Details.for_entry(header_entry)
        )

    def visit(self, account: Account) -> None:
        if should_display(account, self.disp_pred, self.next_lines_format.evaluator):
            self.next_lines_format.render(
                self.output_stream, Details.for_account(account)
            )
            account.displayed = True
            self.total += account.value

    def flush(self) -> None:
        """Write the balancing Equity:Opening Balances line."""
        if self.flushed:
            logger.warning("Equity report flushed more than once")
            return

        summary = Account(OPENING_BALANCES_ACCOUNT)
        summary.value = -self.total
        self.next_lines_format.render(
            self.output_stream, Details.for_account(summary)
        )
        self.output_stream.flush()
        self.flushed = True
        logger.debug(f"Equity counter entry: {summary.value!r}")


__all__ = ['FormatEquity']
