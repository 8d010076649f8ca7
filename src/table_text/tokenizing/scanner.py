"""
Module: tokenizing.scanner

Purpose:
    Delimiter-matching primitive shared by both tokenizer policies. A
    finite-state scanner over code points with two states, OUTSIDE_MATH
    and INSIDE_MATH. No regular expressions, no backtracking.

Key Functions:
    - find_math_spans(): Yield every delimited span in order

Key Classes:
    - ScanState: Scanner states
    - MathSpan: One matched span with its offsets and delimiters

Matching rules:
    - Outside math, the longest opener matching at the current position
      starts a span (ties go to the earlier configured pair).
    - Inside math, only the active pair's closer ends the span. The first
      closer wins, so spans never extend past it.
    - Openers inside a span are plain content (one delimiter pair per span).
    - Line breaks are ordinary characters.
    - An opener with no closer before the end of input is literal text,
      and scanning resumes right after that opener.
    - Each closer is searched to the end of input at most once, so a scan
      is linear in the text length for a fixed set of pairs.

Used By:
    - tokenizing.tokenizer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence, Set, Tuple

from table_text.config import DEFAULT_DELIMITER_PAIRS, DelimiterPair


class ScanState(Enum):
    OUTSIDE_MATH = "outside"
    INSIDE_MATH = "inside"


@dataclass(frozen=True, slots=True)
class MathSpan:
    """
    A delimited math span in the source text.

    Attributes:
        start: Offset of the opener
        end: Offset just past the closer
        opener: Opening delimiter
        closer: Closing delimiter
        expression: Text between the delimiters
    """

    start: int
    end: int
    opener: str
    closer: str
    expression: str

    @property
    def raw(self) -> str:
        return f"{self.opener}{self.expression}{self.closer}"


def find_math_spans(
    text: str,
    pairs: Sequence[DelimiterPair] = DEFAULT_DELIMITER_PAIRS,
) -> Iterator[MathSpan]:
    """
    Scan `text` and yield non-overlapping math spans left to right.

    Args:
        text: Source text
        pairs: (open, close) delimiter pairs

    Yields:
        MathSpan for each complete span
    """
    # Longest opener first so "\[[" style openers beat their prefixes.
    ordered = sorted(enumerate(pairs), key=lambda item: (-len(item[1][0]), item[0]))
    openers: Tuple[DelimiterPair, ...] = tuple(pair for _, pair in ordered)

    state = ScanState.OUTSIDE_MATH
    active: Optional[DelimiterPair] = None
    span_start = 0
    body_start = 0
    pos = 0
    length = len(text)
    # Closers already scanned to end of input; none occurs past that point.
    exhausted: Set[str] = set()

    while pos < length:
        if state is ScanState.OUTSIDE_MATH:
            active = _opener_at(text, pos, openers)
            if active is None:
                pos += 1
                continue
            if active[1] in exhausted:
                pos += len(active[0])
                active = None
                continue
            state = ScanState.INSIDE_MATH
            span_start = pos
            pos += len(active[0])
            body_start = pos
        else:
            closer = active[1]
            if text.startswith(closer, pos):
                end = pos + len(closer)
                yield MathSpan(
                    start=span_start,
                    end=end,
                    opener=active[0],
                    closer=closer,
                    expression=text[body_start:pos],
                )
                state = ScanState.OUTSIDE_MATH
                active = None
                pos = end
            else:
                pos += 1

        if state is ScanState.INSIDE_MATH and pos >= length:
            # Unterminated: the opener is literal, rescan after it.
            exhausted.add(active[1])
            state = ScanState.OUTSIDE_MATH
            pos = span_start + len(active[0])
            active = None


def _opener_at(text: str, pos: int, openers: Sequence[DelimiterPair]) -> Optional[DelimiterPair]:
    for pair in openers:
        if text.startswith(pair[0], pos):
            return pair
    return None
