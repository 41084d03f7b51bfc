"""ResultNode dataclass and NodeType StrEnum for fetched result trees.

Provides the read-only tree abstraction the flattener walks.  The shape
follows the DOM: an element's ``children`` holds text and comment nodes in
document order alongside child elements, so "skip non-element nodes" is an
explicit step for callers.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto


class NodeType(StrEnum):
    """Enumeration of the three node kinds in a result tree.

    - ELEMENT -> "element" : A tagged element with attributes and children
    - TEXT    -> "text"    : Character data between or inside elements
    - COMMENT -> "comment" : Comments and processing instructions (ignored)
    """

    ELEMENT = auto()
    TEXT = auto()
    COMMENT = auto()


@dataclass(slots=True)
class ResultNode:
    """A node in a fetched result tree.

    Attributes:
        node_type:  Which kind of node this is (see NodeType).
        tag:        Element tag name; empty string for TEXT and COMMENT nodes.
        text:       Character data for TEXT nodes; empty for elements.
        attributes: Element attributes.  Empty for non-element nodes.
        children:   Child nodes in document order, text nodes included.
    """

    node_type: NodeType
    tag: str = ""
    text: str = ""
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[ResultNode] = field(default_factory=list)

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT

    def has_child_nodes(self) -> bool:
        """Return True if this node has any children, text nodes included."""
        return bool(self.children)

    def element_children(self) -> list[ResultNode]:
        """Return the direct child elements, skipping text and comments."""
        return [child for child in self.children if child.is_element]

    def get_attribute(self, name: str, default: str | None = None) -> str | None:
        return self.attributes.get(name, default)

    def text_content(self) -> str:
        """Return the concatenated text of this node and all its descendants.

        Mirrors DOM ``textContent``: comments contribute nothing, nested
        element text is included in document order.
        """
        if self.node_type == NodeType.TEXT:
            return self.text
        if self.node_type == NodeType.COMMENT:
            return ""
        return "".join(child.text_content() for child in self.children)

    def iter_elements(self, tag: str) -> Iterator[ResultNode]:
        """Yield every element named ``tag`` in document order.

        The node itself is included when it matches, like
        ``getElementsByTagName`` called on a document.
        """
        if not self.is_element:
            return
        if self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter_elements(tag)

    def find_text(self, tag: str, default: str = "") -> str:
        """Return the text content of the first ``tag`` element, or ``default``."""
        for element in self.iter_elements(tag):
            return element.text_content()
        return default
