"""
Module: parsing.parser

Purpose:
    Parse the raw host value (a JSON array of conversation tuples) into an
    ordered ParseResult. Failures are returned, never raised.

Key Functions:
    - parse_conversations(): Raw string -> ParseResult

Dependencies:
    - json (std)
    - table_text.parsing.validator: Per-element validation

Used By:
    - rendering.builder.render_table_value
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from table_text.config import TableTextConfig
from table_text.core.models import ConversationEntry, ParseResult, UnitFault

from .validator import UnitValidationError, validate_unit

logger = logging.getLogger(__name__)

PARSE_ERROR_PREFIX = "Couldn't parse JSON"


def parse_conversations(raw: Any, config: Optional[TableTextConfig] = None) -> ParseResult:
    """
    Parse a raw conversation value.

    Every call decodes `raw` again; nothing is cached between calls.

    Args:
        raw: JSON text encoding an array of tuples
        config: Supplies the field offset (defaults to TableTextConfig())

    Returns:
        ParseResult with one entry per array element in input order, or a
        failure result carrying the error message

    Example:
        >>> result = parse_conversations('[["Q1", "A1"], ["Q2"]]')
        >>> [(u.question, u.answer) for u in result.units]
        [('Q1', 'A1'), ('Q2', '')]
    """
    config = config or TableTextConfig()

    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        # also covers int-digit limits and deep nesting
        message = f"{PARSE_ERROR_PREFIX}: {e}"
        logger.error(message)
        return ParseResult.failure(message)

    if not isinstance(data, list):
        message = f"{PARSE_ERROR_PREFIX}: expected an array of conversations, got {type(data).__name__}"
        logger.error(message)
        return ParseResult.failure(message)

    entries: List[ConversationEntry] = []
    for index, element in enumerate(data):
        try:
            entries.append(validate_unit(element, index, config.field_offset))
        except UnitValidationError as e:
            logger.warning("Skipping malformed conversation: %s", e)
            entries.append(UnitFault(index=e.index, message=str(e)))

    logger.debug("Parsed %d conversations (%d faults)", len(entries),
                 sum(isinstance(e, UnitFault) for e in entries))
    return ParseResult.success(tuple(entries))
