"""
Module: config

Purpose:
    Single configuration structure for the conversation renderer. Collapses
    the field offset, delimiter pairs, marker character, tokenizer mode and
    typeset debounce into one immutable object passed at construction.

Key Classes:
    - TableTextConfig: Validated, frozen configuration
    - TokenizerMode: Alternating-split vs extract-only tokenizing
    - ConfigError: Raised for invalid configuration values

Key Functions:
    - load_config(path): Read a JSON config file, falling back to defaults

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - parsing.parser: field_offset
    - rendering.builder: delimiter_pairs, marker_char, mode
    - gui.table_text_view: debounce_ms
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Tuple

logger = logging.getLogger(__name__)


DelimiterPair = Tuple[str, str]

PAREN_DELIMITERS: DelimiterPair = ("\\(", "\\)")
BRACKET_DELIMITERS: DelimiterPair = ("\\[", "\\]")
DEFAULT_DELIMITER_PAIRS: Tuple[DelimiterPair, ...] = (PAREN_DELIMITERS, BRACKET_DELIMITERS)

DEFAULT_MARKER_CHAR = "$"
DEFAULT_DEBOUNCE_MS = 100


class ConfigError(ValueError):
    """Raised when a configuration value is invalid."""
    pass


class TokenizerMode(str, Enum):
    """How math is pulled out of a text field."""

    ALTERNATING = "alternating"  # Text, Math, Text, ... inline
    EXTRACT = "extract"          # raw text kept, expressions listed after it


@dataclass(frozen=True)
class TableTextConfig:
    """
    Configuration for conversation rendering (immutable).

    Attributes:
        field_offset: Tuple position of the question field. 0 reads
            positions (0, 1), 1 reads positions (1, 2) for payloads that
            carry a leading speaker/id column.
        delimiter_pairs: (open, close) pairs that wrap math in source text
        marker_char: Inline-math marker handed to the typeset engine
        mode: Tokenizer policy for each field
        debounce_ms: Delay before a typeset trigger is acted on

    Invariants:
        - field_offset in (0, 1)
        - every delimiter is a non-empty string
        - marker_char is one character, absent from every delimiter
        - debounce_ms >= 0

    Example:
        >>> config = TableTextConfig(field_offset=1)
        >>> config.field_positions
        (1, 2)
    """

    field_offset: int = 0
    delimiter_pairs: Tuple[DelimiterPair, ...] = DEFAULT_DELIMITER_PAIRS
    marker_char: str = DEFAULT_MARKER_CHAR
    mode: TokenizerMode = TokenizerMode.ALTERNATING
    debounce_ms: int = DEFAULT_DEBOUNCE_MS

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.field_offset not in (0, 1):
            raise ConfigError(f"field_offset must be 0 or 1: {self.field_offset!r}")
        if not self.delimiter_pairs:
            raise ConfigError("delimiter_pairs must not be empty")
        for pair in self.delimiter_pairs:
            if len(pair) != 2 or not all(isinstance(d, str) and d for d in pair):
                raise ConfigError(f"Invalid delimiter pair: {pair!r}")
        if not isinstance(self.marker_char, str) or len(self.marker_char) != 1:
            raise ConfigError(f"marker_char must be a single character: {self.marker_char!r}")
        for opener, closer in self.delimiter_pairs:
            if self.marker_char in opener or self.marker_char in closer:
                raise ConfigError(
                    f"marker_char {self.marker_char!r} collides with delimiter "
                    f"pair ({opener!r}, {closer!r})"
                )
        if not isinstance(self.mode, TokenizerMode):
            raise ConfigError(f"Invalid tokenizer mode: {self.mode!r}")
        if self.debounce_ms < 0:
            raise ConfigError(f"debounce_ms must be non-negative: {self.debounce_ms}")

    @property
    def field_positions(self) -> Tuple[int, int]:
        """Tuple positions of (question, answer)."""
        return (self.field_offset, self.field_offset + 1)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TableTextConfig:
        """
        Build a config from JSON-style settings.

        Accepts lists for delimiter pairs and the mode by value
        ("alternating" / "extract"). Unknown keys are ignored.

        Raises:
            ConfigError: If any value is invalid
        """
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be an object, got {type(data).__name__}")

        kwargs: Dict[str, Any] = {}
        if "field_offset" in data:
            kwargs["field_offset"] = data["field_offset"]
        if "delimiter_pairs" in data:
            pairs = data["delimiter_pairs"]
            if not isinstance(pairs, list) or not all(isinstance(p, list) for p in pairs):
                raise ConfigError("delimiter_pairs must be a list of [open, close] pairs")
            kwargs["delimiter_pairs"] = tuple(tuple(p) for p in pairs)
        if "marker_char" in data:
            kwargs["marker_char"] = data["marker_char"]
        if "mode" in data:
            try:
                kwargs["mode"] = TokenizerMode(data["mode"])
            except ValueError:
                raise ConfigError(f"Invalid tokenizer mode: {data['mode']!r}")
        if "debounce_ms" in data:
            try:
                kwargs["debounce_ms"] = int(data["debounce_ms"])
            except (TypeError, ValueError):
                raise ConfigError(f"debounce_ms must be an integer: {data['debounce_ms']!r}")

        try:
            return cls(**kwargs)
        except TypeError as e:
            raise ConfigError(str(e))


def load_config(path: Path) -> TableTextConfig:
    """
    Load a config from a JSON file.

    Any missing or malformed file falls back to defaults with a warning,
    never an exception.

    Args:
        path: Path to a JSON config file

    Returns:
        Parsed config, or TableTextConfig() on any failure
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return TableTextConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return TableTextConfig.from_dict(data)
    except json.JSONDecodeError as e:
        logger.warning("Config file %s is corrupted, using defaults: %s", path, e)
    except ConfigError as e:
        logger.warning("Invalid config in %s, using defaults: %s", path, e)
    except OSError as e:
        logger.warning("Failed to read config %s, using defaults: %s", path, e)
    return TableTextConfig()
