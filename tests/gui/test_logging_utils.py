"""
Unit tests for table_text.gui.logging_utils.
"""

import logging
from queue import Queue

from table_text.gui.logging_utils import attach_queue_handler, detach_queue_handler
from table_text.parsing import parse_conversations


class TestQueueLogHandler:
    def test_attach_when_parse_fails_then_error_queued(self):
        log_queue = Queue()
        handler = attach_queue_handler(log_queue, "table_text")
        try:
            parse_conversations("not json")
        finally:
            detach_queue_handler(handler, "table_text")

        message, level = log_queue.get_nowait()
        assert level == "ERROR"
        assert "Couldn't parse JSON" in message

    def test_emit_when_debug_then_mapped_to_info(self):
        log_queue = Queue()
        logger = logging.getLogger("table_text.tests.debug")
        logger.setLevel(logging.DEBUG)
        handler = attach_queue_handler(log_queue, logger.name, level=logging.DEBUG)
        try:
            logger.debug("hello")
        finally:
            detach_queue_handler(handler, logger.name)

        assert log_queue.get_nowait() == ("table_text.tests.debug: hello", "INFO")

    def test_detach_when_removed_then_no_more_records(self):
        log_queue = Queue()
        handler = attach_queue_handler(log_queue, "table_text")
        detach_queue_handler(handler, "table_text")

        parse_conversations("not json")

        assert log_queue.empty()
