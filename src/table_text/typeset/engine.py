"""
Typeset engine interface.

The math engine is an external collaborator. The scheduler needs three
things from it: whether its asynchronous entry point is usable yet, a way
to start a typeset pass that returns a future-like handle, and a way to
drop its internal render cache after a failure.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol


class TypesetHandle(Protocol):
    """Future-like handle (concurrent.futures.Future satisfies this)."""

    def add_done_callback(self, fn: Callable[["TypesetHandle"], object]) -> None: ...

    def exception(self, timeout: Optional[float] = None) -> Optional[BaseException]: ...


class TypesetEngine(Protocol):
    def is_ready(self) -> bool:
        """True once the engine's async typeset entry point can be called."""
        ...

    def typeset_async(self) -> TypesetHandle:
        """Start re-typesetting the attached document."""
        ...

    def clear_cache(self) -> None:
        """Drop cached render state so the next pass starts clean."""
        ...
