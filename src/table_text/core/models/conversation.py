"""
Module: conversation

Purpose:
    Conversation data produced by the parser: one ConversationUnit per
    valid JSON tuple, one UnitFault per element that failed validation,
    and the ParseResult that carries either the ordered entries or a
    document-level error.

Key Classes:
    - ConversationUnit: A question/answer pair
    - UnitFault: Validation failure for a single array element
    - ParseResult: Ordered entries or an error message

Dependencies:
    - dataclasses (std)

Used By:
    - parsing.parser
    - rendering.builder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class ConversationUnit:
    """
    One question/answer pair.

    Missing tuple positions are normalized to empty strings upstream,
    so both fields are always strings.
    """

    question: str = ""
    answer: str = ""


@dataclass(frozen=True, slots=True)
class UnitFault:
    """
    An array element that could not be turned into a ConversationUnit.

    Attributes:
        index: Position of the element in the JSON array
        message: Human readable reason
    """

    index: int
    message: str


ConversationEntry = Union[ConversationUnit, UnitFault]


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing a raw conversation value.

    Exactly one of `error` or `entries` is meaningful: a failed parse has
    an error message and no entries (no partial conversation list).

    Attributes:
        entries: Units and faults in JSON array order
        error: Document-level error message, None on success

    Example:
        >>> result = ParseResult.success((ConversationUnit("Q", "A"),))
        >>> result.ok
        True
        >>> [u.question for u in result.units]
        ['Q']
    """

    entries: Tuple[ConversationEntry, ...] = ()
    error: Optional[str] = None

    @classmethod
    def success(cls, entries: Tuple[ConversationEntry, ...]) -> ParseResult:
        return cls(entries=tuple(entries))

    @classmethod
    def failure(cls, message: str) -> ParseResult:
        return cls(entries=(), error=message)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def units(self) -> Tuple[ConversationUnit, ...]:
        """Valid units only, in order."""
        return tuple(e for e in self.entries if isinstance(e, ConversationUnit))

    @property
    def faults(self) -> Tuple[UnitFault, ...]:
        return tuple(e for e in self.entries if isinstance(e, UnitFault))

    def __len__(self) -> int:
        return len(self.entries)
