"""
Node implementation for the parsed document tree.

The layout builder walks this tree read-only; it only needs tag names,
attributes, text and children.
"""

from enum import IntEnum
from typing import Dict, Iterator, List, Optional


class NodeType(IntEnum):
    """Node types as defined in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


class Node:
    """Base node with parent and child relationships."""

    def __init__(self, node_type: NodeType):
        self.node_type = node_type
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    @property
    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        if child.parent_node is not None:
            child.parent_node.child_nodes.remove(child)
        child.parent_node = self
        self.child_nodes.append(child)
        return child

    def iter_descendants(self) -> Iterator['Node']:
        """Iterate over all descendants in document order."""
        stack = list(reversed(self.child_nodes))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.child_nodes))


class Element(Node):
    """An element with a tag name and attributes."""

    def __init__(self, tag_name: str, attributes: Optional[Dict[str, str]] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g. "div")
            attributes: Attribute names to values, in source order
        """
        super().__init__(NodeType.ELEMENT_NODE)
        self.tag_name = tag_name.lower()
        self.attributes: Dict[str, str] = dict(attributes or {})

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} {self.attributes}>"


class Text(Node):
    """A text node."""

    def __init__(self, data: str):
        super().__init__(NodeType.TEXT_NODE)
        self.data = data or ""

    def __repr__(self) -> str:
        return f"<Text {self.data!r}>"


class Comment(Node):
    """A comment node."""

    def __init__(self, data: str):
        super().__init__(NodeType.COMMENT_NODE)
        self.data = data or ""

    def __repr__(self) -> str:
        return f"<Comment {self.data!r}>"


class Document(Node):
    """
    Root of a parsed document.

    Besides the tree itself it records what the HTML parser reported:
    the doctype name, the compatibility (quirks) mode and parse errors.
    """

    def __init__(self):
        super().__init__(NodeType.DOCUMENT_NODE)
        self.doctype: Optional[str] = None
        self.quirks_mode: str = "no quirks"
        self.errors: List[str] = []

    @property
    def document_element(self) -> Optional[Element]:
        """The root element (normally ``html``)."""
        children = self.children
        return children[0] if children else None

    def __repr__(self) -> str:
        return f"<Document doctype={self.doctype!r} quirks_mode={self.quirks_mode!r}>"
