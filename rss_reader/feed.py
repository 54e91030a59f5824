from typing import List

from rss_reader.exceptions import InvalidFeedError, MissingElementError
from rss_reader.tree import Element, Node, find_first_child_by_tag

# Only the root tag and its version attribute are checked; the rest of the
# document is trusted to look like RSS 2.0.

def is_rss2(root: Node) -> bool:
    return (
        root is not None
        and root.is_element
        and root.label == "rss"
        and root.attributes.get("version") == "2.0"
    )

def require_rss2(root: Node) -> Element:
    if not is_rss2(root):
        raise InvalidFeedError()
    return root

def channel_of(root: Element) -> Element:
    idx = find_first_child_by_tag(root, "channel")
    if idx is None:
        raise MissingElementError(root.label, "channel")
    return root.child(idx)

def items_of(channel: Element) -> List[Element]:
    return [c for c in channel.children if c.is_element and c.label == "item"]
