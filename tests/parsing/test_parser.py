"""
Unit tests for parse_conversations.
"""

import json
import logging

import pytest

from table_text.config import TableTextConfig
from table_text.core.models import ConversationUnit, UnitFault
from table_text.parsing import PARSE_ERROR_PREFIX, parse_conversations


class TestParseConversations:
    """Tests for parse_conversations."""

    @pytest.mark.parametrize("count", [0, 1, 7, 50])
    def test_parse_when_n_tuples_then_n_units_in_order(self, count):
        pairs = [[f"Q{i}", f"A{i}"] for i in range(count)]

        result = parse_conversations(json.dumps(pairs))

        assert result.ok
        assert [(u.question, u.answer) for u in result.units] == [tuple(p) for p in pairs]

    def test_parse_when_offset_one_then_reads_positions_one_and_two(self):
        raw = json.dumps([["user-1", "Q", "A", "extra"]])

        result = parse_conversations(raw, TableTextConfig(field_offset=1))

        assert result.units == (ConversationUnit("Q", "A"),)

    def test_parse_when_offset_zero_then_extra_fields_ignored(self):
        result = parse_conversations(json.dumps([["Q", "A", "ignored", 4]]))

        assert result.units == (ConversationUnit("Q", "A"),)

    def test_parse_when_short_tuple_then_missing_fields_empty(self):
        result = parse_conversations(json.dumps([["Only question"], []]))

        assert result.units == (
            ConversationUnit("Only question", ""),
            ConversationUnit("", ""),
        )

    def test_parse_when_invalid_json_then_error_result_not_exception(self, caplog):
        with caplog.at_level(logging.ERROR, logger="table_text.parsing.parser"):
            result = parse_conversations('[["unterminated"')

        assert not result.ok
        assert result.error.startswith(PARSE_ERROR_PREFIX)
        assert result.entries == ()
        assert PARSE_ERROR_PREFIX in caplog.text

    def test_parse_when_deeply_nested_then_error_result(self):
        result = parse_conversations("[" * 100000)

        assert not result.ok
        assert result.error.startswith(PARSE_ERROR_PREFIX)

    def test_parse_when_oversized_int_literal_then_error_result(self):
        result = parse_conversations("[[" + "1" * 5000 + "]]")

        assert not result.ok
        assert result.error.startswith(PARSE_ERROR_PREFIX)

    def test_parse_when_none_value_then_error_result(self):
        result = parse_conversations(None)

        assert not result.ok
        assert result.error.startswith(PARSE_ERROR_PREFIX)

    def test_parse_when_top_level_object_then_error_result(self):
        result = parse_conversations('{"q": "a"}')

        assert not result.ok
        assert "expected an array" in result.error

    def test_parse_when_element_not_tuple_then_fault_at_same_position(self, caplog):
        raw = json.dumps([["Q1", "A1"], {"q": "x"}, ["Q3", "A3"]])

        with caplog.at_level(logging.WARNING, logger="table_text.parsing.parser"):
            result = parse_conversations(raw)

        assert result.ok
        assert len(result) == 3
        assert isinstance(result.entries[1], UnitFault)
        assert result.entries[1].index == 1
        assert result.entries[2] == ConversationUnit("Q3", "A3")
        assert "malformed conversation" in caplog.text

    def test_parse_when_called_twice_then_results_independent(self):
        first = parse_conversations('[["a", "b"]]')
        second = parse_conversations('[["c", "d"]]')

        assert first.units == (ConversationUnit("a", "b"),)
        assert second.units == (ConversationUnit("c", "d"),)
