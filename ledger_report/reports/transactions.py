# Path: ledger_report/reports/transactions.py
"""
Transaction Report Driver

Renders a stream of transactions. The first transaction of each entry
uses the first-line format (date, payee, ...); later transactions of
the same entry use the continuation format. The switch is keyed only
on entry identity: a new entry object starts a new group.
"""

from typing import Optional, TextIO

from ..core.logger.ipo_logging import get_output_logger
from ..format.renderer import Format
from ..model.details import Details
from ..model.journal import Entry, Transaction
from .base_handler import ReportHandler


logger = get_output_logger('format_transactions')


class FormatTransactions(ReportHandler[Transaction]):
    """
    Register-style transaction report.

    Each transaction renders at most once: it is marked displayed after
    rendering and skipped on later visits. Output is flushed after every
    visited transaction so piped consumers see lines immediately.

    Example:
        handler = FormatTransactions(sys.stdout, first_fmt, next_fmt)
        walk_entries(entries, handler)
        handler.flush()
    """

    def __init__(
        self,
        output_stream: TextIO,
        first_line_format: Format,
        next_lines_format: Format
    ):
        self.output_stream = output_stream
        self.first_line_format = first_line_format
        self.next_lines_format = next_lines_format
        self.last_entry: Optional[Entry] = None
        self.rendered_count = 0

    def visit(self, xact: Transaction) -> None:
        if not xact.displayed:
            details = Details.for_transaction(xact)
            if xact.entry is not self.last_entry:
                self.first_line_format.render(self.output_stream, details)
                self.last_entry = xact.entry
            else:
                self.next_lines_format.render(self.output_stream, details)
            xact.displayed = True
            self.rendered_count += 1
        self.output_stream.flush()

    def flush(self) -> None:
        logger.debug(f"Rendered {self.rendered_count} transactions")
        self.output_stream.flush()


__all__ = ['FormatTransactions']
