"""
Module: tokens

Purpose:
    Token types produced by the math tokenizer, and the NO_MATH sentinel
    returned by extract-only tokenizing when a field holds no math.

Key Classes:
    - TextToken: Literal text between math spans
    - MathToken: A delimiter-wrapped math expression
    - NoMath: Type of the NO_MATH sentinel

Used By:
    - tokenizing.tokenizer
    - rendering.builder
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class TextToken:
    """Literal text. May be empty at the ends of an alternating sequence."""

    content: str


@dataclass(frozen=True, slots=True)
class MathToken:
    """
    A math expression recognized by delimiter matching.

    The delimiters are kept so the exact source substring can be rebuilt
    via `raw`.
    """

    expression: str
    opener: str = "\\("
    closer: str = "\\)"

    @property
    def raw(self) -> str:
        """Delimiter-wrapped source text."""
        return f"{self.opener}{self.expression}{self.closer}"


Token = Union[TextToken, MathToken]


class NoMath:
    """Sentinel type: a field with no math. Falsy, and not a list."""

    _instance: "NoMath | None" = None

    def __new__(cls) -> NoMath:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATH"


NO_MATH = NoMath()
