"""
HTML serialization of render trees.

Rows become <div> blocks with BEM class names so host stylesheets can
target question cells, math cells and error boxes:

    richtext__table-item                       answer cell
    richtext__table-item_qa_question           question cell
    richtext__table-item_context_math          cell containing math
    richtext__error-box                        parse / validation error

Math expressions render as a hidden span holding the raw delimited source
followed by a span holding the marker-wrapped expression for the engine.
"""

from __future__ import annotations

import html
import json
from typing import Dict, Iterable, List, Optional

from table_text.core.models import (
    ConversationRow,
    ErrorNode,
    MathContext,
    MathExpression,
    PlainText,
    RenderNode,
    RenderTree,
)

BLOCK = "richtext"

_MATHJAX_SCRIPT = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"


def bem(block: str, elem: Optional[str] = None, mods: Optional[Dict[str, object]] = None) -> str:
    """
    Build a BEM class string.

    Example:
        >>> bem("richtext", "table-item", {"qa": "question"})
        'richtext__table-item richtext__table-item_qa_question'
    """
    base = f"{block}__{elem}" if elem else block
    classes = [base]
    for name, value in (mods or {}).items():
        if value is True:
            classes.append(f"{base}_{name}")
        elif value:
            classes.append(f"{base}_{name}_{value}")
    return " ".join(classes)


def render_html(tree: RenderTree) -> str:
    """Serialize a render tree to an HTML fragment."""
    if isinstance(tree, ErrorNode):
        return _render_error(tree)

    body = "".join(_render_row(index, row) for index, row in enumerate(tree.rows))
    if isinstance(tree, MathContext):
        config = html.escape(json.dumps(tree.config), quote=True)
        return f'<div class="{bem(BLOCK, "math-context")}" data-math-config="{config}">{body}</div>'
    return f"<div>{body}</div>"


def render_document(tree: RenderTree, title: str = "Table Text") -> str:
    """
    Wrap a rendered tree in a full HTML page.

    The engine configuration and loader script are only emitted for a
    MathContext; math-free pages load nothing.
    """
    head: List[str] = [
        '<meta charset="utf-8" />',
        f"<title>{html.escape(title)}</title>",
    ]
    if isinstance(tree, MathContext):
        head.append(f"<script>window.MathJax = {json.dumps(tree.config)};</script>")
        head.append(f'<script defer src="{_MATHJAX_SCRIPT}"></script>')

    head_html = "\n    ".join(head)
    return f"""<!doctype html>
<html lang="en">
  <head>
    {head_html}
  </head>
  <body>
    {render_html(tree)}
  </body>
</html>"""


def _render_row(index: int, row: ConversationRow) -> str:
    if row.error is not None:
        return f'<div data-row="{index}">{_render_error(row.error)}</div>'

    question_math = _has_math(row.question)
    answer_math = _has_math(row.answer)
    question_cls = bem(BLOCK, "table-item", {"qa": "question", "context": "math" if question_math else None})
    answer_cls = bem(BLOCK, "table-item", {"context": "math" if answer_math else None})
    return (
        f'<div data-row="{index}">'
        f'<div class="{question_cls}">{_render_nodes(row.question)}</div>'
        f'<div class="{answer_cls}">{_render_nodes(row.answer)}</div>'
        "</div>"
    )


def _render_nodes(nodes: Iterable[RenderNode]) -> str:
    parts: List[str] = []
    for node in nodes:
        if isinstance(node, PlainText):
            parts.append(html.escape(node.content))
        elif isinstance(node, MathExpression):
            if node.hidden_raw:
                parts.append(
                    f'<span class="{bem(BLOCK, "math-source")}" style="display:none">'
                    f"{html.escape(node.hidden_raw)}</span>"
                )
            parts.append(f'<span class="{bem(BLOCK, "math")}">{html.escape(node.marked_raw)}</span>')
        elif isinstance(node, ErrorNode):
            parts.append(_render_error(node))
    return "".join(parts)


def _render_error(node: ErrorNode) -> str:
    return f'<div class="{bem(BLOCK, "error-box")}">{html.escape(node.message)}</div>'


def _has_math(nodes: Iterable[RenderNode]) -> bool:
    return any(isinstance(node, MathExpression) for node in nodes)
