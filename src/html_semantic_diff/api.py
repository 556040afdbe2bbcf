"""Public API functions for html-semantic-diff.

This module provides the user-facing functions: normalize_html, compare and
is_equivalent.  Each call creates a fresh HTMLComparator so no state is
shared between calls.
"""

from __future__ import annotations

from html_semantic_diff.comparator import HTMLComparator
from html_semantic_diff.config import NormalizerConfig
from html_semantic_diff.result import ComparisonResult
from html_semantic_diff.tree.nodes import CanonicalNode

__all__ = ["compare", "is_equivalent", "normalize_html"]

Document = str | bytes | CanonicalNode


def normalize_html(
    markup: str | bytes,
    config: NormalizerConfig | None = None,
) -> CanonicalNode:
    """Parse and normalize *markup* into a canonical tree.

    Args:
        markup: HTML text or bytes.
        config: Normalization settings.  Defaults to ``NormalizerConfig()``.

    Returns:
        The DOCUMENT root of the canonical tree.

    Raises:
        ParseError: If the markup cannot be parsed.
    """
    return HTMLComparator(config=config).normalize(markup)


def compare(
    left: Document,
    right: Document,
    config: NormalizerConfig | None = None,
) -> ComparisonResult:
    """Compare two HTML documents and return a ComparisonResult.

    Args:
        left:   Expected document (markup or canonical tree).
        right:  Actual document (markup or canonical tree).
        config: Normalization settings applied to markup inputs.

    Returns:
        A ``ComparisonResult``; ``equal`` is True iff no differences were found.
    """
    return HTMLComparator(config=config).compare(left, right)


def is_equivalent(
    left: Document,
    right: Document,
    config: NormalizerConfig | None = None,
) -> bool:
    """Return True if the two documents are semantically equivalent."""
    return compare(left, right, config=config).equal
