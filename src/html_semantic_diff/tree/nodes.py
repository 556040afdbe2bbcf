"""CanonicalNode dataclass and NodeKind StrEnum for the canonical HTML tree.

Provides the data types produced by TreeNormalizer and consumed by the
comparator, the selector engine, and the serializers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum, auto
from types import MappingProxyType


class NodeKind(StrEnum):
    """Enumeration of the three node kinds kept in a canonical tree.

    StrEnum values are the lowercased member names (Python 3.11+):
    - DOCUMENT -> "document" : the single root of every tree
    - ELEMENT  -> "element"  : an HTML element
    - TEXT     -> "text"     : a non-empty run of text

    Comments, doctypes and other raw node kinds are dropped during
    normalization and have no member here.
    """

    DOCUMENT = auto()
    ELEMENT = auto()
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class CanonicalNode:
    """A node in the canonical HTML tree.

    Instances are immutable and hashable: ``children`` and ``class_list``
    are tuples and ``attributes`` is wrapped in a read-only MappingProxyType
    on construction.  ``attributes`` takes no part in the hash.

    Attributes:
        kind:          Which kind of node this is (see NodeKind).
        tag_name:      Lowercase tag for ELEMENT nodes; "" otherwise.
        attributes:    Attribute name -> value for ELEMENT nodes, noise
                       attributes already removed.  ``id`` and ``class`` stay
                       in this mapping as well as in their own fields.
        text_content:  Normalized text for TEXT nodes; "" otherwise.
        children:      Child nodes in source order.  ``()`` when there are none.
        class_list:    Class tokens in source order.  Compared as a multiset.
        id:            Value of the ``id`` attribute; "" when absent.
        computed_path: Tag-only ancestor chain, e.g. "html > body > div".
        selector_path: Ancestor chain of tag#id / tag.class discriminators.
                       For display only; siblings can share it.
    """

    kind: NodeKind
    tag_name: str = ""
    attributes: Mapping[str, str] = field(default_factory=dict, hash=False)
    text_content: str = ""
    children: tuple[CanonicalNode, ...] = ()
    class_list: tuple[str, ...] = ()
    id: str = ""
    computed_path: str = ""
    selector_path: str = ""

    def __post_init__(self) -> None:
        # frozen: coerce through object.__setattr__; the copy detaches the
        # proxy from any dict the caller still holds
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def is_element(self) -> bool:
        return self.kind == NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind == NodeKind.TEXT
