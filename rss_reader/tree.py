"""Read-only labeled tree handed over by the XML parser.

Two node kinds: ``Element`` (tag, attributes, children) and ``Text`` (raw
content). An element's text, when it has any, is a single ``Text`` child at
index 0 whose label may be the empty string.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from rss_reader.exceptions import ContractError, MissingElementError

_NO_ATTRS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class Text:
    label: str

    @property
    def is_element(self) -> bool:
        return False

    @property
    def attributes(self) -> Mapping[str, str]:
        return _NO_ATTRS

    @property
    def children(self) -> Tuple["Node", ...]:
        return ()


@dataclass(frozen=True)
class Element:
    label: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self):
        # freeze whatever the caller passed in
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def is_element(self) -> bool:
        return True

    def child(self, index: int) -> "Node":
        return self.children[index]

    def attribute(self, name: str, default: str = "") -> str:
        return self.attributes.get(name, default)


Node = Union[Element, Text]


def find_first_child_by_tag(node: Node, tag_name: str) -> Optional[int]:
    """Index of the first direct child labeled ``tag_name``, or None.

    Matching is exact and case-sensitive; later duplicates are never seen.
    """
    if node is None or not node.is_element:
        raise ContractError("lookup target must be an element node")
    if not tag_name:
        raise ContractError("tag name must be a non-empty string")
    for i, c in enumerate(node.children):
        if c.is_element and c.label == tag_name:
            return i
    return None


def child_text(node: Element, tag_name: str) -> str:
    """Text content of the first ``tag_name`` child; raises if the child is absent."""
    idx = find_first_child_by_tag(node, tag_name)
    if idx is None:
        raise MissingElementError(node.label, tag_name)
    return text_of(node.child(idx))


def text_of(element: Element) -> str:
    if not element.children or element.children[0].is_element:
        return ""
    return element.children[0].label
