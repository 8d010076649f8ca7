"""
Module: rendering.builder

Purpose:
    Build the render node tree for a raw conversation value. This is the
    value -> node conversion handed to the host display surface.

Key Functions:
    - build_field(): One text field -> render nodes + has_math
    - build_rows(): ParseResult -> ConversationRows
    - render_table_value(): Raw value -> RenderTree
    - math_context_config(): Delimiter config registered with the engine

Layouts:
    - ALTERNATING: text and math nodes strictly interleaved in source order,
      starting and ending with text (possibly empty). Each math node keeps
      the raw delimited source as hidden text.
    - EXTRACT: the raw field as one text node followed by one math node per
      expression (no hidden raw, the source text is already visible).

Dependencies:
    - table_text.parsing: parse_conversations
    - table_text.tokenizing: split_math, extract_math

Used By:
    - host.table_text_binding
    - gui.table_text_view
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from table_text.config import TableTextConfig, TokenizerMode
from table_text.core.models import (
    ConversationRow,
    ConversationUnit,
    ErrorNode,
    MathContext,
    MathExpression,
    MathToken,
    NO_MATH,
    ParseResult,
    PlainText,
    RenderNode,
    RenderTree,
    RowGroup,
    UnitFault,
)
from table_text.parsing import parse_conversations
from table_text.tokenizing import extract_math, split_math

logger = logging.getLogger(__name__)


def math_context_config(marker_char: str) -> Dict[str, Any]:
    """
    Engine delimiter configuration for the marker character.

    Example:
        >>> math_context_config("$")
        {'tex': {'inlineMath': [['$', '$']]}}
    """
    return {"tex": {"inlineMath": [[marker_char, marker_char]]}}


def build_field(text: str, config: TableTextConfig) -> Tuple[Tuple[RenderNode, ...], bool]:
    """
    Build render nodes for one question or answer field.

    Args:
        text: Field text
        config: Supplies mode, delimiter pairs and marker

    Returns:
        (nodes, has_math)
    """
    marker = config.marker_char

    if config.mode is TokenizerMode.EXTRACT:
        expressions = extract_math(text, config.delimiter_pairs)
        if expressions is NO_MATH:
            return (PlainText(text),), False
        nodes: List[RenderNode] = [PlainText(text)]
        for expression in expressions:
            nodes.append(MathExpression(
                expression=expression,
                hidden_raw="",
                marked_raw=f"{marker}{expression}{marker}",
            ))
        return tuple(nodes), True

    nodes = []
    has_math = False
    for token in split_math(text, config.delimiter_pairs):
        if isinstance(token, MathToken):
            has_math = True
            nodes.append(MathExpression(
                expression=token.expression,
                hidden_raw=token.raw,
                marked_raw=f"{marker}{token.expression}{marker}",
            ))
        else:
            nodes.append(PlainText(token.content))
    return tuple(nodes), has_math


def build_row(unit: ConversationUnit, config: TableTextConfig) -> ConversationRow:
    question, question_math = build_field(unit.question, config)
    answer, answer_math = build_field(unit.answer, config)
    return ConversationRow(
        question=question,
        answer=answer,
        has_math=question_math or answer_math,
    )


def build_rows(result: ParseResult, config: TableTextConfig) -> Tuple[ConversationRow, ...]:
    """
    Build one row per parse entry, preserving order.

    Faulted entries become rows carrying an ErrorNode.
    """
    rows: List[ConversationRow] = []
    for entry in result.entries:
        if isinstance(entry, UnitFault):
            rows.append(ConversationRow(error=ErrorNode(entry.message)))
        else:
            rows.append(build_row(entry, config))
    return tuple(rows)


def render_table_value(raw: Any, config: Optional[TableTextConfig] = None) -> RenderTree:
    """
    Convert a raw conversation value into a render tree.

    Never raises for bad input: a parse failure yields an ErrorNode.

    Args:
        raw: JSON text encoding an array of conversation tuples
        config: Rendering configuration (defaults to TableTextConfig())

    Returns:
        - ErrorNode when the value cannot be parsed
        - RowGroup when no row contains math (no engine context needed)
        - MathContext wrapping all rows when any row contains math
    """
    config = config or TableTextConfig()

    result = parse_conversations(raw, config)
    if not result.ok:
        return ErrorNode(result.error or "")

    rows = build_rows(result, config)
    if not any(row.has_math for row in rows):
        return RowGroup(rows=rows)

    logger.debug("Math found in %d of %d rows", sum(r.has_math for r in rows), len(rows))
    return MathContext(config=math_context_config(config.marker_char), rows=rows)
