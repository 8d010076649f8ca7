"""
Module: tokenizing.tokenizer

Purpose:
    Math tokenizer policies over the shared scanner. Both policies run the
    same delimiter matching and differ only in what they keep.

Key Functions:
    - split_math(): Alternating Text/Math token sequence (inline layout)
    - extract_math(): Interior expressions only, or NO_MATH

Used By:
    - rendering.builder
"""

from __future__ import annotations

from typing import List, Sequence, Union

from table_text.config import DEFAULT_DELIMITER_PAIRS, DelimiterPair
from table_text.core.models import NO_MATH, MathToken, NoMath, TextToken, Token

from .scanner import find_math_spans


def split_math(
    text: str,
    pairs: Sequence[DelimiterPair] = DEFAULT_DELIMITER_PAIRS,
) -> List[Token]:
    """
    Split a field into alternating text and math tokens.

    The result always has odd length, starts and ends with a TextToken
    (possibly empty) and alternates strictly Text, Math, Text, ...

    Args:
        text: One question or answer field
        pairs: (open, close) delimiter pairs

    Returns:
        Token list; [TextToken(text)] when no math is present

    Example:
        >>> [t.content if isinstance(t, TextToken) else t.expression
        ...  for t in split_math("What is \\\\(2+2\\\\)?")]
        ['What is ', '2+2', '?']
    """
    tokens: List[Token] = []
    cursor = 0
    for span in find_math_spans(text, pairs):
        tokens.append(TextToken(text[cursor:span.start]))
        tokens.append(MathToken(span.expression, span.opener, span.closer))
        cursor = span.end
    tokens.append(TextToken(text[cursor:]))
    return tokens


def extract_math(
    text: str,
    pairs: Sequence[DelimiterPair] = DEFAULT_DELIMITER_PAIRS,
) -> Union[List[str], NoMath]:
    """
    List the math expressions of a field.

    Args:
        text: One question or answer field
        pairs: (open, close) delimiter pairs

    Returns:
        Interior expressions in order, or NO_MATH when there are none.
        NO_MATH is distinct from an empty list so callers can skip
        math-specific layout.
    """
    expressions = [span.expression for span in find_math_spans(text, pairs)]
    if not expressions:
        return NO_MATH
    return expressions
