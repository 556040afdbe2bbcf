"""Selector engine: finds canonical nodes by a simplified CSS selector.

Grammar: whitespace-separated simple selectors, each a bare tag name,
``#id`` or ``.class``, read as a descendant chain (``"#main p"``).  Compound
selectors (``div.x``), other combinators, attribute selectors and
pseudo-classes are not supported; such segments match nothing.

A chain may start at any depth, and every node that starts a matching
chain contributes its matches.  The result is therefore NOT deduplicated:
for ``"div p"`` a ``<p>`` nested in two ``<div>`` ancestors is returned
twice.  Callers that need uniqueness deduplicate by identity themselves.
"""

from __future__ import annotations

from html_semantic_diff.tree.nodes import CanonicalNode

__all__ = ["matches_segment", "select"]


def matches_segment(node: CanonicalNode, segment: str) -> bool:
    """Return True if *node* matches one simple selector *segment*."""
    if not node.is_element or not segment:
        return False
    if segment[0] == "#":
        return len(segment) > 1 and node.id == segment[1:]
    if segment[0] == ".":
        return len(segment) > 1 and segment[1:] in node.class_list
    return segment == node.tag_name


def select(root: CanonicalNode, selector: str) -> list[CanonicalNode]:
    """Return every node under (and including) *root* matching *selector*.

    Args:
        root:     Any canonical node, usually the document root.
        selector: e.g. ``"div"``, ``"#main p"``, ``".nav a"``.

    Returns:
        Matches in traversal order; ``[]`` when nothing matches or the
        selector is blank.
    """
    segments = selector.split()
    if not segments:
        return []
    results: list[CanonicalNode] = []
    _collect(root, segments, 0, results)
    return results


def _collect(
    node: CanonicalNode,
    segments: list[str],
    index: int,
    results: list[CanonicalNode],
) -> None:
    if matches_segment(node, segments[index]):
        if index == len(segments) - 1:
            results.append(node)
        else:
            for child in node.children:
                _collect(child, segments, index + 1, results)

    # the same segment may also start deeper down
    for child in node.children:
        _collect(child, segments, index, results)
