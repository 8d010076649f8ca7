"""
Table Text Core Package

Shared data models for the conversation rendering pipeline:

    raw JSON -> ParseResult -> Tokens (per field) -> RenderTree
"""

from .models import ConversationUnit, ParseResult, MathContext, RowGroup, ErrorNode

__all__ = [
    "ConversationUnit",
    "ParseResult",
    "MathContext",
    "RowGroup",
    "ErrorNode",
]
