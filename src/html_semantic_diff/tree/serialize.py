"""JSON and indented-tree renderings of a CanonicalNode tree.

JSON uses the camelCase field names of the canonical data model (``kind``,
``tagName``, ``attributes``, ``textContent``, ``children``, ``classList``,
``id``, ``computedPath``, ``selectorPath``).  Empty optional fields are
omitted rather than written as null/empty, and ``from_dict`` restores them
to their empty defaults, so a decoded tree compares equal to the original.

The tree rendering is meant for people reading test output::

    <html>
      <body>
        <h1>
          "Hello World"
        </h1>
      </body>
    </html>
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from html_semantic_diff.errors import UnknownFormatError
from html_semantic_diff.tree.nodes import CanonicalNode, NodeKind

__all__ = [
    "FORMATS",
    "from_dict",
    "from_json",
    "render",
    "render_tree",
    "to_dict",
    "to_json",
]

_INDENT = "  "


def to_dict(node: CanonicalNode) -> dict[str, Any]:
    """Encode *node* and its subtree as plain JSON-compatible data."""
    data: dict[str, Any] = {"kind": str(node.kind)}
    if node.tag_name:
        data["tagName"] = node.tag_name
    if node.attributes:
        data["attributes"] = dict(node.attributes)
    if node.text_content:
        data["textContent"] = node.text_content
    if node.children:
        data["children"] = [to_dict(child) for child in node.children]
    if node.class_list:
        data["classList"] = list(node.class_list)
    if node.id:
        data["id"] = node.id
    if node.computed_path:
        data["computedPath"] = node.computed_path
    if node.selector_path:
        data["selectorPath"] = node.selector_path
    return data


def from_dict(data: dict[str, Any]) -> CanonicalNode:
    """Rebuild a CanonicalNode tree from ``to_dict`` output.

    Raises:
        ValueError: If ``kind`` is missing or not a known node kind.
    """
    try:
        kind = NodeKind(data["kind"])
    except (KeyError, ValueError) as exc:
        raise ValueError(f"invalid node kind in {data!r}") from exc
    return CanonicalNode(
        kind=kind,
        tag_name=data.get("tagName", ""),
        attributes=dict(data.get("attributes", {})),
        text_content=data.get("textContent", ""),
        children=tuple(from_dict(child) for child in data.get("children", ())),
        class_list=tuple(data.get("classList", ())),
        id=data.get("id", ""),
        computed_path=data.get("computedPath", ""),
        selector_path=data.get("selectorPath", ""),
    )


def to_json(node: CanonicalNode) -> str:
    """Serialize *node* as two-space indented JSON ending in a newline."""
    return json.dumps(to_dict(node), indent=2, ensure_ascii=False) + "\n"


def from_json(text: str) -> CanonicalNode:
    return from_dict(json.loads(text))


def render_tree(node: CanonicalNode, level: int = 0) -> str:
    """Render *node* as an indented, human-readable tree.

    Elements print as ``<tag id="…" class="…" attr="…">`` followed by their
    children one level deeper and a closing tag, or as ``<tag …/>`` when they
    have no children.  Text prints quoted.  The document prints its children
    at its own level.
    """
    lines: list[str] = []
    _render_lines(node, level, lines)
    return "".join(f"{line}\n" for line in lines)


def _render_lines(node: CanonicalNode, level: int, lines: list[str]) -> None:
    indent = _INDENT * level

    if node.kind == NodeKind.DOCUMENT:
        for child in node.children:
            _render_lines(child, level, lines)
        return

    if node.is_text:
        lines.append(f'{indent}"{node.text_content}"')
        return

    parts = [f"{indent}<{node.tag_name}"]
    if node.id:
        parts.append(f' id="{node.id}"')
    if node.class_list:
        parts.append(f' class="{" ".join(node.class_list)}"')
    for name, value in node.attributes.items():
        if name.lower() not in ("id", "class"):
            parts.append(f' {name}="{value}"')

    if not node.children:
        lines.append("".join(parts) + "/>")
        return

    lines.append("".join(parts) + ">")
    for child in node.children:
        _render_lines(child, level + 1, lines)
    lines.append(f"{indent}</{node.tag_name}>")


FORMATS: dict[str, Callable[[CanonicalNode], str]] = {
    "json": to_json,
    "tree": render_tree,
}


def render(node: CanonicalNode, fmt: str) -> str:
    """Render *node* in the named output format.

    Raises:
        UnknownFormatError: If *fmt* is not one of ``FORMATS``.
    """
    try:
        renderer = FORMATS[fmt]
    except KeyError:
        raise UnknownFormatError(fmt, tuple(FORMATS)) from None
    return renderer(node)
