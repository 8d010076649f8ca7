"""
Module: typeset.scheduler

Purpose:
    Coordinates re-typesetting of math after content is attached to the
    display surface. Guarantees at most one in-flight engine call per
    scheduler, collapses bursts of triggers into one call, and retries
    once after a failure.

Key Classes:
    - TypesetState: IDLE / DEBOUNCING / IN_FLIGHT
    - TypesetScheduler: Debounced, single-flight typeset coordinator

Protocol:
    1. trigger() in IDLE or DEBOUNCING -> DEBOUNCING, (re)start the timer.
       In IN_FLIGHT the trigger is absorbed: no timer, state kept.
    2. Timer elapses with a handle stored -> no-op.
    3. Engine not ready -> no-op, the host's own first typeset applies.
    4. Otherwise call the engine, store the handle -> IN_FLIGHT.
    5. Success -> clear handle -> IDLE.
    6. Failure -> clear engine cache, clear handle -> IDLE, then trigger()
       once more. A failed retry ends the chain at IDLE.

Dependencies:
    - PySide6.QtCore: QTimer for the debounce, Signal for thread-safe
      completion delivery

Used By:
    - gui.table_text_view.TableTextView
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from table_text.config import DEFAULT_DEBOUNCE_MS

from .engine import TypesetEngine, TypesetHandle

logger = logging.getLogger(__name__)


class TypesetState(Enum):
    IDLE = "idle"
    DEBOUNCING = "debouncing"
    IN_FLIGHT = "in_flight"


class TypesetScheduler(QObject):
    """
    Debounced, single-flight typeset coordinator.

    One scheduler belongs to one host view, so separate views never block
    each other. All state lives on the Qt thread that owns the scheduler;
    engine handles that complete on another thread are delivered back
    through a queued signal.

    Usage:
        scheduler = TypesetScheduler(engine, debounce_ms=100)
        scheduler.trigger()   # from the view's mount/update hook

    Signals:
        stateChanged(TypesetState): Emitted on every state transition
        typesetFinished(): An engine pass completed successfully
        typesetFailed(str): An engine pass failed (a retry may follow)
    """

    MAX_RETRIES = 1

    stateChanged = Signal(object)
    typesetFinished = Signal()
    typesetFailed = Signal(str)

    # Carries the settled handle back onto this object's thread.
    _handleSettled = Signal(object)

    def __init__(
        self,
        engine: TypesetEngine,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._handle: Optional[TypesetHandle] = None
        self._state = TypesetState.IDLE
        self._retries_used = 0

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(debounce_ms)
        self._timer.timeout.connect(self._on_debounce_elapsed)

        self._handleSettled.connect(self._on_handle_settled)

    # ─────────────────────────────────────────────────────────────────────────
    # Public API
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> TypesetState:
        return self._state

    @property
    def handle(self) -> Optional[TypesetHandle]:
        """The in-flight engine handle, None when nothing is running."""
        return self._handle

    @property
    def is_retrying(self) -> bool:
        return self._retries_used > 0

    def trigger(self) -> None:
        """Request a typeset pass after the debounce delay."""
        if self._state is TypesetState.IN_FLIGHT:
            # The running pass picks up the current content.
            logger.debug("Typeset already in flight, trigger absorbed")
            return
        self._set_state(TypesetState.DEBOUNCING)
        self._timer.start()

    # ─────────────────────────────────────────────────────────────────────────
    # Callback chain
    # ─────────────────────────────────────────────────────────────────────────

    @Slot()
    def _on_debounce_elapsed(self) -> None:
        if self._handle is not None:
            logger.debug("Typeset already in flight, skipping")
            return

        if not self._engine.is_ready():
            logger.debug("Typeset engine not ready, deferring to its initial pass")
            self._retries_used = 0
            self._set_state(TypesetState.IDLE)
            return

        try:
            handle = self._engine.typeset_async()
        except Exception as e:
            self._on_failure(e)
            return

        self._handle = handle
        self._set_state(TypesetState.IN_FLIGHT)
        # May fire synchronously if the handle is already settled.
        handle.add_done_callback(self._handleSettled.emit)

    @Slot(object)
    def _on_handle_settled(self, handle: TypesetHandle) -> None:
        if handle is not self._handle:
            return

        try:
            error = handle.exception()
        except CancelledError as e:
            error = e

        if error is not None:
            self._on_failure(error)
            return

        self._handle = None
        if self._retries_used:
            logger.info("Typeset succeeded after retry")
        else:
            logger.debug("Typeset finished")
        self._retries_used = 0
        self._set_state(TypesetState.IDLE)
        self.typesetFinished.emit()

    def _on_failure(self, error: BaseException) -> None:
        self._handle = None
        try:
            self._engine.clear_cache()
        except Exception:
            logger.exception("Failed to clear typeset engine cache")
        self._set_state(TypesetState.IDLE)
        self.typesetFailed.emit(str(error))

        if self._retries_used >= self.MAX_RETRIES:
            logger.error("Typeset failed after retry: %s", error)
            self._retries_used = 0
            return

        logger.warning("Typeset failed, clearing cache and retrying: %s", error)
        self._retries_used += 1
        self.trigger()

    def _set_state(self, state: TypesetState) -> None:
        if state is self._state:
            return
        logger.debug("Typeset state %s -> %s", self._state.value, state.value)
        self._state = state
        self.stateChanged.emit(state)
