"""Tree subpackage for HTML-to-canonical-tree conversion primitives.

Re-exports the public API for the tree module:
- CanonicalNode: frozen dataclass representing a node in the canonical tree
- NodeKind: StrEnum of the three node kinds (DOCUMENT, ELEMENT, TEXT)
- TreeNormalizer: converts a parsed BeautifulSoup document into a CanonicalNode tree
- parse_html: parses markup with BeautifulSoup
- to_dict / from_dict / to_json / from_json / render_tree / render: serializers
"""

from html_semantic_diff.tree.nodes import CanonicalNode, NodeKind
from html_semantic_diff.tree.normalizer import TreeNormalizer, collapse_whitespace
from html_semantic_diff.tree.parser import parse_html
from html_semantic_diff.tree.serialize import (
    from_dict,
    from_json,
    render,
    render_tree,
    to_dict,
    to_json,
)

__all__ = [
    "CanonicalNode",
    "NodeKind",
    "TreeNormalizer",
    "collapse_whitespace",
    "from_dict",
    "from_json",
    "parse_html",
    "render",
    "render_tree",
    "to_dict",
    "to_json",
]
