"""
Unit tests for the host binding.
"""

from table_text.config import TableTextConfig
from table_text.core.models import MathContext, MathExpression, PlainText
from table_text.host import table_text_binding


class TestTableTextBinding:
    def test_binding_when_default_then_inline_and_not_text(self):
        binding = table_text_binding()

        assert binding.always_inline is True
        assert binding.is_text is False

    def test_binding_when_config_given_then_conversion_uses_it(self):
        binding = table_text_binding(TableTextConfig(marker_char="#"))

        tree = binding.value_to_component('[["\\\\(x\\\\)", ""]]')

        assert isinstance(tree, MathContext)
        assert tree.config == {"tex": {"inlineMath": [["#", "#"]]}}
        assert tree.rows[0].question == (
            PlainText(""), MathExpression("x", "\\(x\\)", "#x#"), PlainText(""),
        )
