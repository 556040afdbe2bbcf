"""TreeNormalizer: converts a parsed BeautifulSoup document into a CanonicalNode tree.

Raw node kinds are mapped as follows:
- BeautifulSoup (the parsed document) -> DOCUMENT
- Tag                                 -> ELEMENT
- NavigableString                     -> TEXT
- Comment, Doctype, CData, ProcessingInstruction, Declaration -> dropped

Subtrees rooted at a tag in ``NormalizerConfig.drop_tags`` are dropped
whole, as are attributes whose name starts with a noise prefix and text
nodes that are empty once whitespace has been handled.

Paths are built top-down: each element receives its parent's finished
``computed_path`` / ``selector_path`` and extends them by one segment.
The document root contributes no segment, so its element children start
the chain from "".
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.element import PreformattedString

from html_semantic_diff.config import NormalizerConfig
from html_semantic_diff.tree.nodes import CanonicalNode, NodeKind

__all__ = ["PATH_SEPARATOR", "TreeNormalizer", "collapse_whitespace"]

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " > "


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim both ends.

    Example::

        collapse_whitespace("  a\\n\\tb  ")  # "a b"
    """
    return " ".join(text.split())


def _join_path(parent: str, segment: str) -> str:
    return segment if not parent else f"{parent}{PATH_SEPARATOR}{segment}"


@dataclass
class TreeNormalizer:
    """Builds canonical trees from BeautifulSoup documents.

    Stateless apart from its config, so one instance can normalize any number
    of documents.

    Example::

        normalizer = TreeNormalizer()
        root = normalizer.normalize_document(parse_html("<p class='a  b'>Hi</p>"))
        # root: DOCUMENT -> ELEMENT(p, class_list=("a", "b")) -> TEXT("Hi")
    """

    config: NormalizerConfig = field(default_factory=NormalizerConfig)

    def normalize(
        self,
        raw: PageElement,
        parent_path: str = "",
        parent_selector_path: str = "",
    ) -> CanonicalNode | None:
        """Convert *raw* and its subtree into a CanonicalNode.

        Args:
            raw:                  A BeautifulSoup document, Tag, or string node.
            parent_path:          The parent's finished ``computed_path``.
            parent_selector_path: The parent's finished ``selector_path``.

        Returns:
            The canonical node, or None when *raw* is dropped.
        """
        # BeautifulSoup subclasses Tag: check the document first
        if isinstance(raw, BeautifulSoup):
            return self.normalize_document(raw)
        if isinstance(raw, Tag):
            if self.config.is_dropped_tag(raw.name):
                return None
            return self._normalize_element(raw, parent_path, parent_selector_path)
        # Comment, Doctype, CData, ... are all PreformattedString
        if isinstance(raw, PreformattedString):
            return None
        if isinstance(raw, NavigableString):
            return self._normalize_text(raw)
        return None

    def normalize_document(self, doc: BeautifulSoup) -> CanonicalNode:
        """Convert a whole parsed document; the result is always the DOCUMENT root."""
        children = self._normalize_children(doc, "", "")
        logger.debug("normalized document with %d top-level nodes", len(children))
        return CanonicalNode(kind=NodeKind.DOCUMENT, children=children)

    def _normalize_text(self, raw: NavigableString) -> CanonicalNode | None:
        text = str(raw)
        if self.config.normalize_whitespace:
            text = collapse_whitespace(text)
        if not text:
            return None
        return CanonicalNode(kind=NodeKind.TEXT, text_content=text)

    def _normalize_element(
        self,
        tag: Tag,
        parent_path: str,
        parent_selector_path: str,
    ) -> CanonicalNode:
        tag_name = tag.name.lower()
        attributes: dict[str, str] = {}
        node_id = ""
        class_list: tuple[str, ...] = ()

        for name, value in tag.attrs.items():
            if self.config.is_dropped_attribute(name):
                continue
            if isinstance(value, list):
                # soup built elsewhere with multi-valued attributes enabled
                value = " ".join(value)
            attributes[name] = value
            lowered = name.lower()
            if lowered == "id":
                node_id = value
            elif lowered == "class":
                class_list = tuple(value.split())

        segment = tag_name
        if node_id:
            segment = f"{tag_name}#{node_id}"
        elif class_list:
            segment = f"{tag_name}.{'.'.join(class_list)}"

        computed_path = _join_path(parent_path, tag_name)
        selector_path = _join_path(parent_selector_path, segment)

        return CanonicalNode(
            kind=NodeKind.ELEMENT,
            tag_name=tag_name,
            attributes=attributes,
            children=self._normalize_children(tag, computed_path, selector_path),
            class_list=class_list,
            id=node_id,
            computed_path=computed_path,
            selector_path=selector_path,
        )

    def _normalize_children(
        self,
        parent: Tag,
        path: str,
        selector_path: str,
    ) -> tuple[CanonicalNode, ...]:
        children = []
        for child in parent.children:
            node = self.normalize(child, path, selector_path)
            if node is not None:
                children.append(node)
        return tuple(children)
