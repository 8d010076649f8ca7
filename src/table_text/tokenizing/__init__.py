"""
Tokenizing Package

Finite-state delimiter scanner and the two math tokenizer policies.
"""

from .scanner import find_math_spans, MathSpan, ScanState
from .tokenizer import split_math, extract_math

__all__ = [
    "find_math_spans",
    "MathSpan",
    "ScanState",
    "split_math",
    "extract_math",
]
