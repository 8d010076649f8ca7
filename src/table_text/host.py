"""
Host display surface binding.

The host rich-text surface already provides annotation and selection. It
is configured with a value -> render tree conversion and told to render
inline: typesetting needs to share the main document, so the host's
default separate-frame rendering is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

from table_text.config import TableTextConfig
from table_text.core.models import RenderTree
from table_text.rendering import render_table_value


@dataclass(frozen=True)
class HostBinding:
    """
    Options handed to the host surface.

    Attributes:
        value_to_component: Converts the raw task value to a render tree
        always_inline: Render in the main document, never a separate frame
        is_text: The value is structured data, not plain text
    """

    value_to_component: Callable[[Any], RenderTree]
    always_inline: bool = True
    is_text: bool = False


def table_text_binding(config: Optional[TableTextConfig] = None) -> HostBinding:
    """Binding for conversation tables rendered with `config`."""
    config = config or TableTextConfig()
    return HostBinding(value_to_component=partial(render_table_value, config=config))
