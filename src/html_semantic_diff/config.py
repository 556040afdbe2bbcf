"""NormalizerConfig: noise-filter and whitespace settings for normalization.

NormalizerConfig is a frozen (immutable) dataclass.  The noise rules that
decide which tags and attributes never reach the canonical tree live here
rather than in the normalizer, so tests and callers can swap them out.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "DEFAULT_DROP_ATTRIBUTE_PREFIXES",
    "DEFAULT_DROP_TAGS",
    "DEFAULT_PARSER",
    "NormalizerConfig",
]

DEFAULT_DROP_TAGS: frozenset[str] = frozenset({"script", "style"})
DEFAULT_DROP_ATTRIBUTE_PREFIXES: frozenset[str] = frozenset({"data-", "aria-"})
DEFAULT_PARSER: str = "html.parser"


def _lowered(values: Iterable[str], name: str) -> frozenset[str]:
    if isinstance(values, str):
        msg = f"{name} must be a collection of strings, got a bare string {values!r}"
        raise ValueError(msg)
    result = frozenset(v.lower() for v in values)
    if "" in result:
        msg = f"{name} must not contain empty strings"
        raise ValueError(msg)
    return result


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Immutable configuration for TreeNormalizer.

    Attributes:
        normalize_whitespace: When True, every whitespace run in a text node
            collapses to one space and the text is trimmed.  When False, text
            is kept verbatim.  Default True.
        drop_tags: Tag names whose whole subtree is omitted.  Compared
            case-insensitively.  Default ``{"script", "style"}``.
        drop_attribute_prefixes: Attribute name prefixes that mark an
            attribute as noise.  Compared against the lowercase attribute
            name.  Default ``{"data-", "aria-"}``.
        parser: BeautifulSoup parser feature used when markup is parsed
            (``"html.parser"``, ``"lxml"``, ``"html5lib"``).
    """

    normalize_whitespace: bool = True
    drop_tags: frozenset[str] = DEFAULT_DROP_TAGS
    drop_attribute_prefixes: frozenset[str] = DEFAULT_DROP_ATTRIBUTE_PREFIXES
    parser: str = DEFAULT_PARSER

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__
        object.__setattr__(self, "drop_tags", _lowered(self.drop_tags, "drop_tags"))
        object.__setattr__(
            self,
            "drop_attribute_prefixes",
            _lowered(self.drop_attribute_prefixes, "drop_attribute_prefixes"),
        )
        if not self.parser:
            msg = "parser must be a non-empty BeautifulSoup feature name"
            raise ValueError(msg)

    def is_dropped_tag(self, tag_name: str) -> bool:
        """Return True if elements named *tag_name* are omitted entirely."""
        return tag_name.lower() in self.drop_tags

    def is_dropped_attribute(self, name: str) -> bool:
        """Return True if the attribute *name* carries a noise prefix."""
        lowered = name.lower()
        return any(lowered.startswith(prefix) for prefix in self.drop_attribute_prefixes)
