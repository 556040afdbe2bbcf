"""Structural comparison of canonical HTML trees.

``compare_nodes`` is the recursive walk: it compares two CanonicalNode
trees position by position and reports every semantic difference it finds,
not only the first.  ``HTMLComparator`` wires TreeNormalizer and
``compare_nodes`` together so callers can hand it raw markup.

Comparison rules:
- Different kinds: one difference, the subtree is not compared further.
- TEXT: exact ``text_content`` equality.
- ELEMENT / DOCUMENT: tag name, id, class list as a multiset, non-id/class
  attributes in both directions (missing / mismatch / extra), child count,
  then children pairwise up to the shorter length.

Messages carry the location of the difference (the element's computed
path; text nodes report the path of the element that contains them) and
both observed values, left first.
"""

from __future__ import annotations

import logging
import time
from collections import Counter

from html_semantic_diff.config import NormalizerConfig
from html_semantic_diff.result import ComparisonResult
from html_semantic_diff.tree.nodes import CanonicalNode, NodeKind
from html_semantic_diff.tree.normalizer import TreeNormalizer
from html_semantic_diff.tree.parser import parse_html

__all__ = ["HTMLComparator", "compare_nodes"]

logger = logging.getLogger(__name__)

ROOT_LOCATION = "(document)"
_PROMOTED_ATTRIBUTES = ("id", "class")


def compare_nodes(a: CanonicalNode, b: CanonicalNode) -> tuple[bool, list[str]]:
    """Compare two canonical trees.

    Args:
        a: Left (usually expected) tree.
        b: Right (usually actual) tree.

    Returns:
        ``(equal, differences)`` where ``equal`` is True iff ``differences``
        is empty.
    """
    differences: list[str] = []
    _diff(a, b, "", differences)
    return not differences, differences


def _where(node: CanonicalNode, context: str) -> str:
    return node.computed_path or context or ROOT_LOCATION


def _class_lists_equal(a: tuple[str, ...], b: tuple[str, ...]) -> bool:
    return len(a) == len(b) and Counter(a) == Counter(b)


def _plain_attributes(node: CanonicalNode) -> dict[str, str]:
    return {
        name: value
        for name, value in node.attributes.items()
        if name.lower() not in _PROMOTED_ATTRIBUTES
    }


def _diff(a: CanonicalNode, b: CanonicalNode, context: str, out: list[str]) -> None:
    where = _where(a, context)

    if a.kind != b.kind:
        out.append(f"Node kind mismatch at {where}: {a.kind} vs {b.kind}")
        return

    if a.kind == NodeKind.TEXT:
        if a.text_content != b.text_content:
            out.append(
                f'Text content mismatch at {where}: "{a.text_content}" vs "{b.text_content}"'
            )
        return

    if a.tag_name != b.tag_name:
        out.append(f"Tag name mismatch at {where}: {a.tag_name} vs {b.tag_name}")

    if a.id != b.id:
        out.append(f'ID mismatch at {where}: "{a.id}" vs "{b.id}"')

    if not _class_lists_equal(a.class_list, b.class_list):
        out.append(
            f"Class list mismatch at {where}: {list(a.class_list)} vs {list(b.class_list)}"
        )

    a_attrs = _plain_attributes(a)
    b_attrs = _plain_attributes(b)
    for name, value in a_attrs.items():
        if name not in b_attrs:
            out.append(f'Missing attribute {name} at {where}: "{value}" vs <absent>')
        elif value != b_attrs[name]:
            out.append(
                f'Attribute {name} mismatch at {where}: "{value}" vs "{b_attrs[name]}"'
            )
    for name, value in b_attrs.items():
        if name not in a_attrs:
            out.append(f'Extra attribute {name} at {where}: <absent> vs "{value}"')

    if len(a.children) != len(b.children):
        out.append(
            f"Children count mismatch at {where}: {len(a.children)} vs {len(b.children)}"
        )

    # zip stops at the shorter child list
    for a_child, b_child in zip(a.children, b.children):
        _diff(a_child, b_child, a.computed_path or context, out)


class HTMLComparator:
    """Compares HTML documents after normalizing them.

    Either side of ``compare()`` may be markup (``str``/``bytes``) or an
    already built CanonicalNode tree.  Markup is parsed with the parser named
    in the config and normalized with a TreeNormalizer sharing that config.

    Example::

        from html_semantic_diff.comparator import HTMLComparator

        cmp = HTMLComparator()
        result = cmp.compare("<p class='a b'>Hi</p>", "<p class='b a'> Hi </p>")
        print(result.equal)         # True
        print(result.differences)   # []
    """

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        self._config: NormalizerConfig = (
            config if config is not None else NormalizerConfig()
        )
        self._normalizer = TreeNormalizer(config=self._config)

    @property
    def config(self) -> NormalizerConfig:
        return self._config

    def normalize(self, document: str | bytes | CanonicalNode) -> CanonicalNode:
        """Return *document* as a canonical tree, parsing it if needed.

        Raises:
            ParseError: If markup cannot be parsed.
        """
        if isinstance(document, CanonicalNode):
            return document
        soup = parse_html(document, parser=self._config.parser)
        return self._normalizer.normalize_document(soup)

    def compare(
        self,
        left: str | bytes | CanonicalNode,
        right: str | bytes | CanonicalNode,
    ) -> ComparisonResult:
        """Compare two documents and return a ComparisonResult.

        Args:
            left:  Expected document, markup or canonical tree.
            right: Actual document, markup or canonical tree.

        Returns:
            A ``ComparisonResult`` with ``equal``, ``differences`` and
            ``computation_time_ms`` populated.

        Raises:
            ParseError: If either side is markup that cannot be parsed.
        """
        t0 = time.perf_counter()
        equal, differences = compare_nodes(self.normalize(left), self.normalize(right))
        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "compared documents in %.3f ms: %d difference(s)",
            elapsed_ms,
            len(differences),
        )
        return ComparisonResult(
            equal=equal,
            differences=differences,
            computation_time_ms=elapsed_ms,
        )
