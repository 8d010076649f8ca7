"""
Parsing Package

JSON conversation parsing with per-element validation.
"""

from .parser import parse_conversations, PARSE_ERROR_PREFIX
from .validator import validate_unit, UnitValidationError

__all__ = [
    "parse_conversations",
    "PARSE_ERROR_PREFIX",
    "validate_unit",
    "UnitValidationError",
]
