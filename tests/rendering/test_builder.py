"""
Unit tests for the render node builder.
"""

import json

import pytest

from table_text.config import TableTextConfig, TokenizerMode
from table_text.core.models import (
    ErrorNode,
    MathContext,
    MathExpression,
    PlainText,
    RowGroup,
)
from table_text.parsing import parse_conversations
from table_text.rendering import (
    build_field,
    build_rows,
    math_context_config,
    render_table_value,
)


class TestBuildField:
    """Tests for build_field."""

    def test_build_when_inline_math_then_plain_math_plain(self):
        nodes, has_math = build_field("What is \\(2+2\\)?", TableTextConfig())

        assert has_math
        assert nodes == (
            PlainText("What is "),
            MathExpression(expression="2+2", hidden_raw="\\(2+2\\)", marked_raw="$2+2$"),
            PlainText("?"),
        )

    def test_build_when_no_math_then_single_plain_node(self):
        nodes, has_math = build_field("Just text", TableTextConfig())

        assert not has_math
        assert nodes == (PlainText("Just text"),)

    def test_build_when_custom_marker_then_marked_with_it(self):
        nodes, _ = build_field("\\[x\\]", TableTextConfig(marker_char="@"))

        assert nodes == (PlainText(""), MathExpression("x", "\\[x\\]", "@x@"), PlainText(""))

    @pytest.mark.parametrize("text", [
        "\\(a\\)\\(b\\)",
        "\\[x\\] tail",
        "head \\(y\\)",
        "",
    ])
    def test_build_when_alternating_then_text_and_math_strictly_interleave(self, text):
        nodes, _ = build_field(text, TableTextConfig())

        assert len(nodes) % 2 == 1
        for i, node in enumerate(nodes):
            expected = PlainText if i % 2 == 0 else MathExpression
            assert isinstance(node, expected)

    @pytest.mark.parametrize("text", [
        "a \\(b\\) c",
        "\\[x^2\\] and \\(y\\)",
        "multi \\(a\n+ b\\) line",
    ])
    def test_build_when_math_then_hidden_raw_is_source_substring(self, text):
        nodes, _ = build_field(text, TableTextConfig())

        for node in nodes:
            if isinstance(node, MathExpression):
                assert node.hidden_raw in text
                assert node.expression in node.hidden_raw

        rebuilt = "".join(
            n.content if isinstance(n, PlainText) else n.hidden_raw for n in nodes
        )
        assert rebuilt == text

    def test_build_when_extract_mode_then_text_followed_by_math(self):
        config = TableTextConfig(mode=TokenizerMode.EXTRACT)

        nodes, has_math = build_field("\\(a\\) and \\(b\\)", config)

        assert has_math
        assert nodes == (
            PlainText("\\(a\\) and \\(b\\)"),
            MathExpression("a", "", "$a$"),
            MathExpression("b", "", "$b$"),
        )

    def test_build_when_extract_mode_without_math_then_text_only(self):
        config = TableTextConfig(mode=TokenizerMode.EXTRACT)

        assert build_field("no math", config) == ((PlainText("no math"),), False)


class TestBuildRows:
    """Tests for build_rows."""

    def test_rows_when_math_in_answer_only_then_row_has_math(self):
        result = parse_conversations(json.dumps([["plain", "\\(x\\)"]]))

        rows = build_rows(result, TableTextConfig())

        assert rows[0].has_math

    def test_rows_when_fault_entry_then_error_row_in_position(self):
        result = parse_conversations(json.dumps([["a", "b"], 5, ["c", "d"]]))

        rows = build_rows(result, TableTextConfig())

        assert len(rows) == 3
        assert not rows[0].is_fault
        assert rows[1].is_fault
        assert isinstance(rows[1].error, ErrorNode)
        assert rows[2].question == (PlainText("c"),)


class TestRenderTableValue:
    """Tests for render_table_value."""

    def test_render_when_math_present_then_math_context(self, math_value):
        tree = render_table_value(math_value)

        assert isinstance(tree, MathContext)
        assert tree.config == {"tex": {"inlineMath": [["$", "$"]]}}
        assert [row.has_math for row in tree.rows] == [True, False]

    def test_render_when_no_math_then_row_group(self, plain_value):
        tree = render_table_value(plain_value)

        assert isinstance(tree, RowGroup)
        assert len(tree.rows) == 2

    def test_render_when_invalid_json_then_error_node(self):
        tree = render_table_value("not json")

        assert isinstance(tree, ErrorNode)
        assert tree.message.startswith("Couldn't parse JSON")

    def test_render_when_oversized_int_literal_then_error_node(self):
        tree = render_table_value("[[" + "1" * 5000 + "]]")

        assert isinstance(tree, ErrorNode)
        assert tree.message.startswith("Couldn't parse JSON")

    def test_render_when_offset_one_then_uses_later_positions(self):
        raw = json.dumps([["id-1", "\\(q\\)", "a"]])

        tree = render_table_value(raw, TableTextConfig(field_offset=1))

        assert isinstance(tree, MathContext)
        assert tree.rows[0].question == (
            PlainText(""), MathExpression("q", "\\(q\\)", "$q$"), PlainText(""),
        )

    def test_math_context_config_when_marker_then_pair_of_marker(self):
        assert math_context_config("%") == {"tex": {"inlineMath": [["%", "%"]]}}
