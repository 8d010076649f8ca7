"""
Reference host surface for conversation tables.

A QTextBrowser that shows the rendered tree inline and, when a typeset
engine is supplied, triggers a typeset pass each time math-bearing content
is mounted or re-rendered while shown.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QShowEvent
from PySide6.QtWidgets import QTextBrowser, QVBoxLayout, QWidget

from table_text.config import TableTextConfig
from table_text.core.models import MathContext, RenderTree
from table_text.host import HostBinding, table_text_binding
from table_text.rendering import render_html
from table_text.typeset import TypesetEngine, TypesetScheduler

logger = logging.getLogger(__name__)


class TableTextView(QWidget):
    """
    Displays a conversation value as annotated rich text.

    Without an engine no scheduler is created and math is left to the
    engine's own initial typeset.
    """

    # Emitted with the RenderTree after every set_value()
    valueRendered = Signal(object)

    def __init__(
        self,
        config: Optional[TableTextConfig] = None,
        engine: Optional[TypesetEngine] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or TableTextConfig()
        self._binding = table_text_binding(self._config)
        self._tree: Optional[RenderTree] = None
        self._scheduler: Optional[TypesetScheduler] = None
        if engine is not None:
            self._scheduler = TypesetScheduler(engine, debounce_ms=self._config.debounce_ms, parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.browser = QTextBrowser()
        self.browser.setReadOnly(True)
        self.browser.setOpenLinks(False)
        layout.addWidget(self.browser)

    @property
    def binding(self) -> HostBinding:
        return self._binding

    @property
    def tree(self) -> Optional[RenderTree]:
        return self._tree

    @property
    def scheduler(self) -> Optional[TypesetScheduler]:
        return self._scheduler

    def set_value(self, raw: Any) -> None:
        """Render a raw conversation value."""
        self._tree = self._binding.value_to_component(raw)
        self.browser.setHtml(render_html(self._tree))
        self.valueRendered.emit(self._tree)
        if self.isVisible():
            self._on_mounted()

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        self._on_mounted()

    def _on_mounted(self) -> None:
        if self._scheduler is None or not isinstance(self._tree, MathContext):
            return
        logger.debug("Math content mounted, requesting typeset")
        self._scheduler.trigger()
