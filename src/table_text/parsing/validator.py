"""
Conversation Element Validation

Turns one decoded JSON array element into a typed ConversationUnit.

Rules:
- The element must be a JSON array (tuple). Objects, strings and numbers
  are faults.
- Positions beyond the two selected by the field offset are ignored.
- Missing positions and null become "".
- Numbers and booleans become their JSON text ("2", "true").
- Nested arrays/objects in a selected position are faults.
"""

from __future__ import annotations

import json
from typing import Any

from table_text.core.models import ConversationUnit


class UnitValidationError(Exception):
    """Raised when an array element cannot become a ConversationUnit."""

    def __init__(self, message: str, index: int, path: str = ""):
        super().__init__(message)
        self.index = index
        self.path = path


def validate_unit(element: Any, index: int, field_offset: int = 0) -> ConversationUnit:
    """
    Validate a single conversation tuple.

    Args:
        element: Decoded JSON value at `index` of the top-level array
        index: Position in the array (for error messages)
        field_offset: 0 reads positions (0, 1), 1 reads (1, 2)

    Returns:
        ConversationUnit with string fields

    Raises:
        UnitValidationError: If the element is not a tuple or a selected
            field is not a scalar
    """
    if not isinstance(element, list):
        raise UnitValidationError(
            f"Conversation {index} must be an array, got {_json_type(element)}",
            index=index,
            path=f"[{index}]",
        )

    question = _field(element, field_offset, index)
    answer = _field(element, field_offset + 1, index)
    return ConversationUnit(question=question, answer=answer)


def _field(element: list, position: int, index: int) -> str:
    """Read one tuple position as a string."""
    if position >= len(element):
        return ""
    value = element[position]
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise UnitValidationError(
        f"Conversation {index} field {position} must be text, got {_json_type(value)}",
        index=index,
        path=f"[{index}][{position}]",
    )


def _json_type(value: Any) -> str:
    """JSON type name for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
