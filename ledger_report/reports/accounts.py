# Path: ledger_report/reports/accounts.py
"""
Account Report Driver

Renders account-tree nodes that pass a display predicate. The tree
walk itself happens in reports.walk; this driver only decides, per
visited account, whether it gets a line.

Collapsing rule:
    A parent whose only displayable child carries the same total is
    not shown on its own line. The child is shown instead, and its
    partial name (%n) includes the parent's segment, so a chain like
    Assets -> Checking prints as a single 'Assets:Checking' line.
    A parent with two or more displayable children, or with a child
    whose total differs from its own, is shown.
"""

from typing import Optional, TextIO, Union

from ..core.logger.ipo_logging import get_output_logger
from ..expr.predicate import ItemPredicate, PredicateSpec
from ..format.evaluator import ValueEvaluator
from ..format.renderer import Format
from ..model.account import Account
from ..model.details import Details
from .base_handler import ReportHandler


logger = get_output_logger('format_account')


def should_recurse_into_subaccounts(
    account: Account,
    predicate: Optional[ItemPredicate],
    evaluator: ValueEvaluator
) -> tuple[bool, Optional[Account]]:
    """
    Decide whether an account stands above its children in the report.

    Args:
        account: Parent account
        predicate: Display predicate (None matches everything)
        evaluator: Supplies the totals being compared

    Returns:
        (True, None) if two or more children are displayable, or one
        displayable child's total differs from the account's total.
        Otherwise (False, child) with the single displayable child, or
        (False, None) when no child is displayable.
    """
    representative = None
    account_total = None
    computed = False

    for child in account.sorted_children():
        if predicate is not None and not predicate.matches(child):
            continue

        child_total = evaluator.compute_total(Details.for_account(child))
        if not computed:
            account_total = evaluator.compute_total(Details.for_account(account))
            computed = True

        if representative is not None or child_total != account_total:
            return True, None
        representative = child

    return False, representative


def should_display(
    account: Account,
    predicate: Optional[ItemPredicate],
    evaluator: ValueEvaluator,
    even_top: bool = False
) -> bool:
    """
    Decide whether an account gets its own report line.

    Args:
        account: Account being visited
        predicate: Display predicate (None matches everything)
        evaluator: Supplies totals for the collapsing rule
        even_top: Show the parentless master account, exempt from the
            predicate, as the report's root line

    Returns:
        False for accounts already displayed. The master account is
        shown only with even_top. Other accounts must match the
        predicate and are shown unless collapsed into their single
        displayable child.
    """
    if account.displayed:
        return False
    if account.parent is None:
        return even_top
    if predicate is not None and not predicate.matches(account):
        return False

    recurse, representative = should_recurse_into_subaccounts(
        account, predicate, evaluator
    )
    return recurse or representative is None


def make_predicate(
    display_predicate: Union[ItemPredicate, PredicateSpec],
    fmt: Format
) -> ItemPredicate:
    """Wrap a predicate spec, compiling text with the format's compiler."""
    if isinstance(display_predicate, ItemPredicate):
        return display_predicate
    return ItemPredicate(display_predicate, compiler=fmt.config.compiler)


class FormatAccount(ReportHandler[Account]):
    """
    Balance-style account report.

    Example:
        handler = FormatAccount(sys.stdout, Format('%20T  %-A\\n'))
        walk_accounts(master, handler)
        handler.flush()
    """

    def __init__(
        self,
        output_stream: TextIO,
        format: Format,
        display_predicate: Union[ItemPredicate, PredicateSpec] = None
    ):
        self.output_stream = output_stream
        self.format = format
        self.disp_pred = make_predicate(display_predicate, format)
        self.rendered_count = 0

    def display_account(self, account: Account, even_top: bool = False) -> bool:
        return should_display(account, self.disp_pred, self.format.evaluator, even_top)

    def visit(self, account: Account) -> None:
        if self.display_account(account):
            self.format.render(self.output_stream, Details.for_account(account))
            account.displayed = True
            self.rendered_count += 1

    def flush(self) -> None:
        logger.debug(f"Rendered {self.rendered_count} accounts")
        self.output_stream.flush()


__all__ = [
    'should_recurse_into_subaccounts',
    'should_display',
    'make_predicate',
    'FormatAccount',
]
