# Path: ledger_report/format/parser.py
"""
Directive Parser

Compiles a format string into a tuple of FormatElement values in one
left-to-right pass.

Directive syntax:
    %[-][MIN][.MAX]KIND

    -       left-align (default is right-align)
    MIN     minimum width, padded with spaces
    MAX     maximum width, truncated with '..'; MIN defaults to MAX
    KIND    one of the codes in constants.KIND_CODES, '%' for a literal
            percent sign, '(expr)' for an embedded value expression or
            '[pattern]' for a date with its own strftime pattern

Everything between directives, newlines included, becomes one literal
element. A string of N directives and M literal runs compiles to N + M
elements.

Example:
    parse_elements('%-20A%12t\\n')
    # (ACCOUNT_PATH left 20, VALUE right 12, LITERAL '\\n')
"""

from typing import Callable

from ..constants import (
    ALIGN_LEFT_CHAR,
    DATE_PATTERN_CLOSE,
    DATE_PATTERN_OPEN,
    DEFAULT_DATE_FORMAT,
    DIRECTIVE_CHAR,
    EXPRESSION_CLOSE,
    EXPRESSION_OPEN,
    KIND_CODES,
    MAX_WIDTH_CHAR,
    ElementKind,
)
from ..core.logger.ipo_logging import get_input_logger
from ..errors import MalformedDirective
from ..expr.compiler import ValueExpr, compile_expression
from .elements import FormatElement


logger = get_input_logger('format_parser')


def _read_digits(fmt: str, pos: int) -> tuple[int, int]:
    """Read a run of digits; returns (value or 0, position after)."""
    start = pos
    while pos < len(fmt) and fmt[pos].isdigit():
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def _read_block(fmt: str, pos: int, close: str, directive_start: int) -> tuple[str, int]:
    """
    Read the body of a bracketed block whose opener is at pos.

    Nested pairs of the same brackets are kept in the body, so
    %((a + 1) * 2) embeds the whole expression.

    Returns:
        (body text, position after the closing character)

    Raises:
        MalformedDirective: If the closing character is missing
    """
    opener = fmt[pos]
    depth = 0
    end = pos
    while end < len(fmt):
        if fmt[end] == opener:
            depth += 1
        elif fmt[end] == close:
            depth -= 1
            if depth == 0:
                break
        end += 1
    if end >= len(fmt):
        raise MalformedDirective(
            f"Missing {close!r} in directive",
            format_string=fmt,
            position=directive_start,
        )
    return fmt[pos + 1:end], end + 1


def parse_elements(
    fmt: str,
    compiler: Callable[[str], ValueExpr] = compile_expression,
    date_format: str = DEFAULT_DATE_FORMAT
) -> tuple[FormatElement, ...]:
    """
    Compile a format string.

    Args:
        fmt: Format string
        compiler: Expression compiler for %(...) directives
        date_format: strftime pattern used by %d

    Returns:
        Elements in source order

    Raises:
        MalformedDirective: Unknown kind code, trailing '%', or an
            unterminated '(' / '[' block
        ExpressionError: An embedded expression does not compile
    """
    elements: list[FormatElement] = []
    literal: list[str] = []
    pos = 0

    while pos < len(fmt):
        char = fmt[pos]
        if char != DIRECTIVE_CHAR:
            literal.append(char)
            pos += 1
            continue

        # Close the pending literal run before the directive
        if literal:
            elements.append(FormatElement.literal(''.join(literal)))
            literal = []

        start = pos
        pos += 1

        align_left = False
        if pos < len(fmt) and fmt[pos] == ALIGN_LEFT_CHAR:
            align_left = True
            pos += 1

        min_width, pos = _read_digits(fmt, pos)
        max_width = 0
        if pos < len(fmt) and fmt[pos] == MAX_WIDTH_CHAR:
            max_width, pos = _read_digits(fmt, pos + 1)
            if min_width == 0:
                min_width = max_width

        if pos >= len(fmt):
            raise MalformedDirective(
                "Directive has no kind",
                format_string=fmt,
                position=start,
            )

        code = fmt[pos]
        widths = dict(align_left=align_left, min_width=min_width, max_width=max_width)

        if code == DIRECTIVE_CHAR:
            element = FormatElement(ElementKind.LITERAL, text=DIRECTIVE_CHAR, **widths)
            pos += 1
        elif code == EXPRESSION_OPEN:
            body, pos = _read_block(fmt, pos, EXPRESSION_CLOSE, start)
            element = FormatElement(
                ElementKind.EXPRESSION, expression=compiler(body), **widths
            )
        elif code == DATE_PATTERN_OPEN:
            body, pos = _read_block(fmt, pos, DATE_PATTERN_CLOSE, start)
            element = FormatElement(ElementKind.DATE, text=body, **widths)
        elif code in KIND_CODES:
            kind = KIND_CODES[code]
            text = date_format if kind is ElementKind.DATE else ''
            element = FormatElement(kind, text=text, **widths)
            pos += 1
        else:
            raise MalformedDirective(
                f"Unknown directive kind {code!r}",
                format_string=fmt,
                position=start,
            )

        elements.append(element)

    if literal:
        elements.append(FormatElement.literal(''.join(literal)))

    logger.debug(f"Compiled format {fmt!r} into {len(elements)} elements")
    return tuple(elements)


__all__ = ['parse_elements']
