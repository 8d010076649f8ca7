"""
Typeset Package

External engine interface and the debounced single-flight scheduler.
"""

from .engine import TypesetEngine, TypesetHandle
from .scheduler import TypesetScheduler, TypesetState

__all__ = [
    "TypesetEngine",
    "TypesetHandle",
    "TypesetScheduler",
    "TypesetState",
]
