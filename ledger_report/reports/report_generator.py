# Path: ledger_report/reports/report_generator.py
"""
Report Generator

Main entry point for producing reports with the configured default
formats. Wires formats, drivers and walkers together for the four
standard reports.

Architecture:
    entries / account tree -> [walk_*] -> [driver] -> Format -> text

Usage:
    generator = ReportGenerator()
    generator.register(entries, sys.stdout)
    generator.balance(master, sys.stdout)
    generator.equity(master, sys.stdout)
"""

from datetime import datetime
from typing import Iterable, Optional, TextIO

from ..config_loader import ConfigLoader
from ..constants import BALANCE_TOTAL_SEPARATOR
from ..core.logger.ipo_logging import get_output_logger
from ..expr.predicate import PredicateSpec
from ..format.config import FormatConfig
from ..format.renderer import Format
from ..model.account import Account
from ..model.details import Details
from ..model.journal import Entry
from .accounts import FormatAccount, should_recurse_into_subaccounts
from .equity import FormatEquity
from .transactions import FormatTransactions
from .walk import CalcTransactions, walk_accounts, walk_entries


class ReportGenerator:
    """
    Produces the standard reports from ConfigLoader settings.

    Example:
        generator = ReportGenerator(config)
        count = generator.balance(master, sys.stdout)
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        format_config: Optional[FormatConfig] = None
    ):
        """
        Initialize report generator.

        Args:
            config: ConfigLoader instance (creates one if not provided)
            format_config: Rendering settings (built from config if not provided)

        Raises:
            ExpressionError: If a configured expression does not compile
        """
        self.config = config or ConfigLoader()
        self.format_config = format_config or FormatConfig.from_loader(self.config)
        self.logger = get_output_logger('report_generator')

    def _format(self, key: str) -> Format:
        return Format(self.config.get(key), self.format_config)

    def _predicate(self, display_predicate: PredicateSpec) -> PredicateSpec:
        if display_predicate is None:
            return self.config.get('display_predicate') or None
        return display_predicate

    # ===========================================================================
    # TRANSACTION REPORTS
    # ===========================================================================
    def register(self, entries: Iterable[Entry], out: TextIO) -> int:
        """
        Write a register: one line per transaction with running totals.

        Returns:
            Number of transactions rendered
        """
        handler = FormatTransactions(
            out,
            self._format('register_format'),
            self._format('register_next_format'),
        )
        chain = CalcTransactions(handler)
        walk_entries(entries, chain)
        chain.flush()

        self.logger.info(f"Register report: {handler.rendered_count} transactions")
        return handler.rendered_count

    def print_entries(self, entries: Iterable[Entry], out: TextIO) -> int:
        """
        Write entries back out in journal style.

        Returns:
            Number of transactions rendered
        """
        handler = FormatTransactions(
            out,
            self._format('print_format'),
            self._format('print_next_format'),
        )
        walk_entries(entries, handler)
        handler.flush()

        self.logger.info(f"Print report: {handler.rendered_count} transactions")
        return handler.rendered_count

    # ===========================================================================
    # ACCOUNT REPORTS
    # ===========================================================================
    def balance(
        self,
        master: Account,
        out: TextIO,
        display_predicate: PredicateSpec = None
    ) -> int:
        """
        Write account balances, with a grand total when the report has
        more than one top-level branch.

        Returns:
            Number of account lines rendered (grand total excluded)
        """
        fmt = self._format('balance_format')
        handler = FormatAccount(out, fmt, self._predicate(display_predicate))
        walk_accounts(master, handler)

        recurse, _ = should_recurse_into_subaccounts(
            master, handler.disp_pred, fmt.evaluator
        )
        if recurse and handler.display_account(master, even_top=True):
            out.write(BALANCE_TOTAL_SEPARATOR)
            fmt.render(out, Details.for_account(master))
            master.displayed = True
        handler.flush()

        self.logger.info(f"Balance report: {handler.rendered_count} accounts")
        return handler.rendered_count

    def equity(
        self,
        master: Account,
        out: TextIO,
        now: Optional[datetime] = None,
        display_predicate: PredicateSpec = None
    ) -> FormatEquity:
        """
        Write an opening-balances entry for the accounts under master.

        Returns:
            The flushed FormatEquity handler (its total is the sum of
            the account lines)
        """
        handler = FormatEquity(
            out,
            self._format('equity_format'),
            self._format('equity_next_format'),
            self._predicate(display_predicate),
            now=now,
        )
        walk_accounts(master, handler)
        handler.flush()

        self.logger.info(f"Equity report: closing total {handler.total!r}")
        return handler


__all__ = ['ReportGenerator']
