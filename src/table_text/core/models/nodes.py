"""
Module: nodes

Purpose:
    Render node tree handed to the host display surface. Leaves are plain
    text, math expressions and error boxes; rows group the nodes of one
    conversation unit; the root is either a MathContext (math present) or
    a plain RowGroup.

Key Classes:
    - PlainText, MathExpression, ErrorNode: Leaf nodes
    - ConversationRow: Nodes for one question/answer pair
    - MathContext: Root wrapping rows in the typeset engine's context
    - RowGroup: Root for math-free content

Used By:
    - rendering.builder
    - rendering.html
    - gui.table_text_view
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class PlainText:
    content: str


@dataclass(frozen=True, slots=True)
class MathExpression:
    """
    An inline math expression.

    Attributes:
        expression: Interior math source
        hidden_raw: Original delimiter-wrapped text, kept in the output but
            visually hidden so selection and labels see the raw characters
            at this position. Empty in the extract-only layout, where the
            raw text is already visible.
        marked_raw: Expression wrapped in the marker character, consumed by
            the typeset engine
    """

    expression: str
    hidden_raw: str
    marked_raw: str


@dataclass(frozen=True, slots=True)
class ErrorNode:
    """Visible error box."""

    message: str


RenderNode = Union[PlainText, MathExpression, ErrorNode]


@dataclass(frozen=True)
class ConversationRow:
    """
    Render nodes for one conversation entry.

    A row built from a UnitFault has empty fields and carries the fault in
    `error` so it still renders at its original position.
    """

    question: Tuple[RenderNode, ...] = ()
    answer: Tuple[RenderNode, ...] = ()
    has_math: bool = False
    error: Optional[ErrorNode] = None

    @property
    def is_fault(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class RowGroup:
    """Root container for rows without math (no engine context)."""

    rows: Tuple[ConversationRow, ...] = ()


@dataclass(frozen=True)
class MathContext:
    """
    Root container wrapping all rows in the typeset engine's context.

    Attributes:
        config: Delimiter configuration registered with the engine,
            e.g. {"tex": {"inlineMath": [["$", "$"]]}}
        rows: Conversation rows
    """

    config: Dict[str, Any] = field(default_factory=dict)
    rows: Tuple[ConversationRow, ...] = ()


RenderTree = Union[MathContext, RowGroup, ErrorNode]
