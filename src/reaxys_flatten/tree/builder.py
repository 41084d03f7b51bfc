"""TreeBuilder: converts an ElementTree document into a ResultNode tree.

ElementTree stores character data on ``text`` and ``tail`` attributes
rather than as nodes.  The builder restores the DOM ordering:

- An element's ``text`` becomes its first TEXT child.
- Each child element is followed by a TEXT node holding that child's ``tail``.
- Comments and processing instructions become COMMENT nodes so that they
  occupy a child position but contribute no text.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from reaxys_flatten.tree.nodes import NodeType, ResultNode

# Type alias for everything build() accepts
TreeSource = ResultNode | ET.Element | ET.ElementTree | str | bytes


@dataclass
class TreeBuilder:
    """Converts fetched XML into a read-only ResultNode tree.

    Accepted inputs:
        - ``ResultNode``: returned unchanged.
        - ``xml.etree.ElementTree.Element`` or ``ElementTree``.
        - ``str`` or ``bytes`` holding an XML document.

    Example::
        builder = TreeBuilder()
        tree = builder.build("<xf><context>reactions</context></xf>")
        tree.find_text("context")   # "reactions"
    """

    def build(self, source: TreeSource) -> ResultNode:
        """Convert ``source`` to a ResultNode tree.

        Raises:
            TypeError: If ``source`` is not one of the accepted types.
            xml.etree.ElementTree.ParseError: If an XML string is malformed.
        """
        if isinstance(source, ResultNode):
            return source

        if isinstance(source, ET.ElementTree):
            root = source.getroot()
            if root is None:
                msg = "ElementTree has no root element"
                raise TypeError(msg)
            return self._build_element(root)

        if isinstance(source, (str, bytes)):
            return self._build_element(ET.fromstring(source))

        if isinstance(source, ET.Element):
            return self._build_element(source)

        msg = f"Unsupported result tree type: {type(source)!r}"
        raise TypeError(msg)

    def _build_element(self, element: ET.Element) -> ResultNode:
        # ET.Comment and ET.ProcessingInstruction use factory functions as tags
        if not isinstance(element.tag, str):
            return ResultNode(node_type=NodeType.COMMENT)

        node = ResultNode(
            node_type=NodeType.ELEMENT,
            tag=element.tag,
            attributes=dict(element.attrib),
        )
        if element.text:
            node.children.append(ResultNode(node_type=NodeType.TEXT, text=element.text))

        for child in element:
            node.children.append(self._build_element(child))
            if child.tail:
                node.children.append(
                    ResultNode(node_type=NodeType.TEXT, text=child.tail)
                )

        return node
