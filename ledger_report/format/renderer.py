# Path: ledger_report/format/renderer.py
"""
Element Renderer

Walks a compiled element tuple for one Details context and writes the
text to an output stream. Every call re-evaluates every element; only
the compiled elements are reused between calls.

Per element:
    1. Produce the raw text for its kind
    2. Truncate to max_width (tail kept for account names, head otherwise)
    3. Pad to min_width on the side opposite the alignment
    4. Write, with no separator between elements

A multi-commodity value renders one line per commodity; every line
after the first is indented to the column where the value started.

Spacers depend on the rest of their line, so a call collects all its
pieces before writing. If an element raises, the pieces gathered so far
are still written before the error propagates.

Usage:
    fmt = Format('%-20A%12t\\n', FormatConfig.from_loader())
    fmt.render(sys.stdout, Details.for_account(account))
"""

from io import StringIO
from typing import NamedTuple, Optional, TextIO, Union

from ..constants import (
    CLEARED_MARKER,
    PENDING_MARKER,
    SPACER_FILL,
    TRUNCATION_POLICIES,
    ElementKind,
    TruncationPolicy,
)
from ..core.logger.ipo_logging import get_output_logger
from ..errors import ExpressionError
from ..model.amount import Amount, Balance
from ..model.details import Details
from ..model.journal import EntryState, Transaction
from .config import FormatConfig
from .elements import FormatElement
from .parser import parse_elements
from .truncate import partial_account_name


logger = get_output_logger('renderer')


class _Lines(NamedTuple):
    """Fitted lines of one multi-line element."""
    lines: tuple[str, ...]


class ElementRenderer:
    """
    Renders element tuples using one FormatConfig.

    Example:
        renderer = ElementRenderer(config)
        renderer.render(elements, Details.for_transaction(xact), out)
    """

    def __init__(self, config: FormatConfig):
        self.config = config

    def render(
        self,
        elements: tuple[FormatElement, ...],
        details: Details,
        out: TextIO
    ) -> None:
        """
        Render elements for one context.

        Raises:
            ExpressionError: Propagated from value expressions, after
                the text rendered so far has been written
        """
        pieces: list[Union[str, FormatElement, _Lines]] = []
        try:
            for element in elements:
                if element.kind is ElementKind.SPACER:
                    pieces.append(element)
                    continue
                text = self._fit(element, self._raw_text(element, details))
                if element.kind is not ElementKind.LITERAL and '\n' in text:
                    pieces.append(_Lines(tuple(text.split('\n'))))
                else:
                    pieces.append(text)
        except ExpressionError as e:
            logger.error(f"Render stopped after {len(pieces)} elements: {e}")
            raise
        finally:
            for text in self._resolve_spacers(pieces):
                out.write(text)

    # ===========================================================================
    # RAW TEXT
    # ===========================================================================
    def _raw_text(self, element: FormatElement, details: Details) -> str:
        kind = element.kind
        entry = details.entry

        if kind is ElementKind.LITERAL:
            return element.text
        if kind is ElementKind.EXPRESSION:
            return _balance_text(element.expression.compute(details))
        if kind is ElementKind.VALUE:
            return _balance_text(self.config.evaluator.compute_value(details))
        if kind is ElementKind.TOTAL:
            return _balance_text(self.config.evaluator.compute_total(details))

        if kind is ElementKind.DATE:
            if entry is None or entry.date is None:
                return ''
            return entry.date.strftime(element.text)
        if kind is ElementKind.CLEARED:
            if entry is None:
                return ''
            if entry.state is EntryState.CLEARED:
                return CLEARED_MARKER
            if entry.state is EntryState.PENDING:
                return PENDING_MARKER
            return ''
        if kind is ElementKind.CODE:
            if entry is None or not entry.code:
                return ''
            return f"({entry.code}) "
        if kind is ElementKind.PAYEE:
            return entry.payee if entry is not None else ''

        if kind is ElementKind.ACCOUNT_NAME:
            if details.account is None:
                return ''
            return partial_account_name(details.account)
        if kind is ElementKind.ACCOUNT_PATH:
            if details.account is None:
                return ''
            return details.account.fullname

        if kind is ElementKind.OPT_AMOUNT:
            return _optional_amount(details.xact)

        raise ValueError(f"Unhandled element kind: {kind}")

    # ===========================================================================
    # WIDTH HANDLING
    # ===========================================================================
    def _fit(self, element: FormatElement, text: str) -> str:
        """Truncate and pad each line of text to the element's widths."""
        if not element.min_width and not element.max_width:
            return text

        policy = TRUNCATION_POLICIES.get(element.kind, TruncationPolicy.KEEP_HEAD)
        lines = []
        for line in text.split('\n'):
            if element.max_width:
                line = self.config.truncate(line, element.max_width, policy)
            if element.align_left:
                line = line.ljust(element.min_width)
            else:
                line = line.rjust(element.min_width)
            lines.append(line)
        return '\n'.join(lines)

    def _resolve_spacers(
        self,
        pieces: list[Union[str, FormatElement, _Lines]]
    ) -> list[str]:
        """
        Lay out pieces against the columns of the current line.

        A spacer with a width fills up to that column. Without one it
        fills so the remainder of its line ends at line_width. Later
        lines of a multi-line value start at the value's own column.
        """
        texts = []
        line = ''
        for index, piece in enumerate(pieces):
            column = len(line)
            if isinstance(piece, FormatElement):
                if piece.min_width:
                    fill = piece.min_width - column
                else:
                    rest = _rest_of_line(pieces[index + 1:])
                    fill = self.config.line_width - column - len(rest)
                piece = SPACER_FILL * max(fill, 0)
            elif isinstance(piece, _Lines):
                piece = ('\n' + SPACER_FILL * column).join(piece.lines)
            texts.append(piece)
            line = (line + piece).rsplit('\n', 1)[-1]
        return texts


def _rest_of_line(pieces: list[Union[str, FormatElement, _Lines]]) -> str:
    """Text from the following pieces up to the next newline."""
    rest = []
    for piece in pieces:
        if isinstance(piece, FormatElement):
            continue
        text = piece.lines[0] if isinstance(piece, _Lines) else piece
        head, newline, _ = text.partition('\n')
        rest.append(head)
        if newline or isinstance(piece, _Lines):
            break
    return ''.join(rest)


def _balance_text(balance: Optional[Balance]) -> str:
    if balance is None:
        return ''
    return '\n'.join(balance.format_lines())


def _optional_amount(xact: Optional[Transaction]) -> str:
    """
    Amount column for entry printouts.

    Priced postings show 'amount @ unit cost'. The last posting of a
    two-posting entry is left blank when it just negates the first.
    """
    if xact is None:
        return ''

    if xact.cost is not None and not xact.amount.is_zero():
        unit_cost = Amount(
            xact.cost.quantity / xact.amount.quantity, xact.cost.commodity
        )
        return f"{xact.amount} @ {unit_cost}"

    if xact.entry is not None:
        postings = [x for x in xact.entry.transactions if not x.auto]
        if (len(postings) == 2 and xact is postings[-1]
                and postings[0].amount == -postings[-1].amount):
            return ''

    return str(xact.amount)


class Format:
    """
    A compiled format string bound to its FormatConfig.

    Attributes:
        format_string: Source string of the current elements
        elements: Compiled elements
        config: Rendering settings

    Example:
        fmt = Format('%-20A%12t\\n')
        text = fmt.render_to_string(Details.for_account(food))
    """

    def __init__(self, format_string: str, config: Optional[FormatConfig] = None):
        """
        Compile a format string.

        Raises:
            MalformedDirective: If a directive is invalid
            ExpressionError: If an embedded expression does not compile
        """
        self.config = config or FormatConfig()
        self._renderer = ElementRenderer(self.config)
        self.format_string = ''
        self.elements: tuple[FormatElement, ...] = ()
        self.reset(format_string)

    def reset(self, format_string: str) -> None:
        """Recompile from a new format string."""
        self.elements = parse_elements(
            format_string,
            compiler=self.config.compiler,
            date_format=self.config.date_format,
        )
        self.format_string = format_string

    @property
    def evaluator(self):
        return self.config.evaluator

    def render(self, out: TextIO, details: Details) -> None:
        """Write this format for one context to out."""
        self._renderer.render(self.elements, details, out)

    def render_to_string(self, details: Details) -> str:
        buffer = StringIO()
        self.render(buffer, details)
        return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Format({self.format_string!r})"


__all__ = ['ElementRenderer', 'Format']
