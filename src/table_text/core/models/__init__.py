"""
Core Models Package

Immutable data models shared by the parser, tokenizer, builder and host.
All models are frozen dataclasses.
"""

from .conversation import ConversationUnit, UnitFault, ParseResult, ConversationEntry
from .tokens import TextToken, MathToken, Token, NO_MATH, NoMath
from .nodes import (
    PlainText,
    MathExpression,
    ErrorNode,
    RenderNode,
    ConversationRow,
    RowGroup,
    MathContext,
    RenderTree,
)

__all__ = [
    "ConversationUnit",
    "UnitFault",
    "ParseResult",
    "ConversationEntry",
    "TextToken",
    "MathToken",
    "Token",
    "NO_MATH",
    "NoMath",
    "PlainText",
    "MathExpression",
    "ErrorNode",
    "RenderNode",
    "ConversationRow",
    "RowGroup",
    "MathContext",
    "RenderTree",
]
