"""Thin boundary around BeautifulSoup.

The canonical tree is built from a parsed BeautifulSoup document.  Parsing
itself is delegated entirely to bs4 and the parser backend it is asked for;
this module only fixes the options the normalizer relies on and turns bs4's
failures into ParseError.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, FeatureNotFound, ParserRejectedMarkup

from html_semantic_diff.config import DEFAULT_PARSER
from html_semantic_diff.errors import ParseError

__all__ = ["parse_html"]

logger = logging.getLogger(__name__)


def parse_html(markup: str | bytes, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse *markup* into a BeautifulSoup document.

    ``multi_valued_attributes=None`` keeps ``class`` (and friends) as the
    verbatim attribute string, so the normalizer sees exactly what the source
    declared.

    Args:
        markup: HTML text or bytes.
        parser: BeautifulSoup parser feature.  Defaults to the stdlib-backed
                ``"html.parser"``, which adds no implied html/head/body
                elements.

    Returns:
        The parsed document.

    Raises:
        ParseError: If the parser backend is not installed or rejects the
            markup.
    """
    logger.debug("parsing %d chars of markup with %s", len(markup), parser)
    try:
        return BeautifulSoup(markup, parser, multi_valued_attributes=None)
    except FeatureNotFound as exc:
        raise ParseError(f"HTML parser {parser!r} is not available: {exc}") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"failed to parse HTML: {exc}") from exc
