"""Tree subpackage for result-tree primitives.

Re-exports the public API for the tree module:
- ResultNode: dataclass representing a node in a fetched result tree
- NodeType: StrEnum of the three node kinds (ELEMENT, TEXT, COMMENT)
- TreeBuilder: converts ElementTree documents or XML text into ResultNode trees
- FieldLabels: resolves raw Reaxys field tags to human-readable labels
"""

from reaxys_flatten.tree.builder import TreeBuilder
from reaxys_flatten.tree.labels import DEFAULT_LABELS, FieldLabels
from reaxys_flatten.tree.nodes import NodeType, ResultNode

__all__ = ["DEFAULT_LABELS", "FieldLabels", "NodeType", "ResultNode", "TreeBuilder"]
