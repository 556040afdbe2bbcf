"""html-semantic-diff - canonical HTML trees for semantic comparison."""

from __future__ import annotations

from html_semantic_diff.api import compare, is_equivalent, normalize_html
from html_semantic_diff.comparator import HTMLComparator, compare_nodes
from html_semantic_diff.config import NormalizerConfig
from html_semantic_diff.errors import (
    HTMLSemanticDiffError,
    InputSourceError,
    OutputError,
    ParseError,
    UnknownFormatError,
)
from html_semantic_diff.result import ComparisonResult
from html_semantic_diff.selector import select
from html_semantic_diff.tree.nodes import CanonicalNode, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "CanonicalNode",
    "ComparisonResult",
    "HTMLComparator",
    "HTMLSemanticDiffError",
    "InputSourceError",
    "NodeKind",
    "NormalizerConfig",
    "OutputError",
    "ParseError",
    "UnknownFormatError",
    "compare",
    "compare_nodes",
    "is_equivalent",
    "normalize_html",
    "select",
]
