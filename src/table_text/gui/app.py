"""
Entry point for the Table Text demo viewer.

Shows a conversation JSON file in a TableTextView with a log console
underneath. No typeset engine is attached, so math appears as marked text.
"""
from __future__ import annotations

import logging
import queue
import sys
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit, QSplitter, QWidget

from table_text.config import TableTextConfig, load_config
from table_text.gui.logging_utils import attach_queue_handler, detach_queue_handler
from table_text.gui.table_text_view import TableTextView

logger = logging.getLogger(__name__)

SAMPLE_VALUE = (
    '[["What is \\\\(2+2\\\\)?", "It is \\\\(4\\\\)."],'
    ' ["Name a prime.", "\\\\[7\\\\] is prime."],'
    ' ["Any math here?", "No."]]'
)


class ViewerWindow(QMainWindow):
    def __init__(self, config: TableTextConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Table Text")
        self.resize(720, 560)

        self.view = TableTextView(config)
        self.console = QPlainTextEdit()
        self.console.setReadOnly(True)

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.view)
        splitter.addWidget(self.console)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.log_queue: queue.Queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue, "table_text")
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

    def closeEvent(self, event) -> None:
        self.log_timer.stop()
        detach_queue_handler(self._log_handler, "table_text")
        super().closeEvent(event)

    def _drain_log_queue(self) -> None:
        while True:
            try:
                text, level = self.log_queue.get_nowait()
            except queue.Empty:
                break
            self.console.appendPlainText(f"[{level}] {text}")


def run(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the viewer.

    Usage: run_table_text.py [conversations.json] [config.json]
    """
    argv = list(sys.argv if argv is None else argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = load_config(Path(argv[2])) if len(argv) > 2 else TableTextConfig()

    app = QApplication(argv)
    app.setApplicationName("Table Text")

    window = ViewerWindow(config)
    if len(argv) > 1:
        path = Path(argv[1])
        try:
            window.view.set_value(path.read_text(encoding="utf-8"))
        except OSError as e:
            logger.error("Failed to read %s: %s", path, e)
            window.view.set_value(SAMPLE_VALUE)
    else:
        window.view.set_value(SAMPLE_VALUE)
    window.show()
    return app.exec()
