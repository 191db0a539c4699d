"""
Layout tree builder.

Walks a parsed document depth-first and creates one layout node per element
(and, depending on configuration, one per text node). Each element's style is
parsed from its own ``style`` attribute only; there is no cascade.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from dragonfly.css.declaration import Declaration, GlobalStyle
from dragonfly.dom.node import Element, Node, Text
from dragonfly.fonts.font_manager import FontManager
from dragonfly.utils.config import Config

from .arena import NodeArena, NodeId
from .node import ROOT_TAG_NAME, LayoutNode, Point

logger = logging.getLogger(__name__)

# Attributes the builder interprets; all others are only copied
HANDLED_ATTRIBUTES = ('style', 'id')


class Layout:
    """
    A tree of positioned, styled layout nodes.

    The tree always has exactly one root node. An ``html`` element replaces
    the root node's contents instead of being added as a child.
    """

    def __init__(self, style: Optional[GlobalStyle] = None, config: Optional[Config] = None):
        """
        Initialize an empty layout holding only the root node.

        Args:
            style: Stylesheet for the page (the default stylesheet if omitted)
            config: Engine configuration
        """
        self.config = config or Config.defaults()
        self.arena: NodeArena[LayoutNode] = NodeArena()
        self.root_id: NodeId = self.arena.new_node(LayoutNode.root())
        self.style: GlobalStyle = style if style is not None else GlobalStyle.default_css()
        self.text_nodes: bool = self.config.get('layout.text_nodes', True)
        self.font_size: float = float(self.config.get('layout.font_size', 14.0))

    @classmethod
    def compute(cls, document: Node, fonts: FontManager, config: Optional[Config] = None,
                style: Optional[GlobalStyle] = None) -> 'Layout':
        """
        Build the layout tree of a document.

        Args:
            document: Parsed document (or any node to start from)
            fonts: FontManager providing text metrics
            config: Engine configuration
            style: Stylesheet for the page

        Returns:
            The computed layout
        """
        layout = cls(style=style, config=config)
        layout._compute_tree(document, fonts)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"computed layout tree:\n{layout.dump()}")
        return layout

    def _compute_tree(self, document: Node, fonts: FontManager) -> None:
        # Explicit stack: documents can nest deeper than the recursion limit
        stack: List[Tuple[Node, NodeId, int]] = [(document, self.root_id, 0)]
        while stack:
            html_node, parent, depth = stack.pop()

            if isinstance(html_node, Element):
                logger.debug(f"compute node {html_node.tag_name}, depth {depth}")
                parent = self._handle_element(html_node, parent, fonts)
            elif isinstance(html_node, Text):
                if self.text_nodes:
                    logger.debug(f"adding text to parent node {parent}")
                    self.add_node(LayoutNode.text_node(html_node.data), parent, fonts)
            else:
                logger.debug(f"unhandled html node {html_node!r}")

            # Reversed so siblings are popped in document order
            for child in reversed(html_node.child_nodes):
                stack.append((child, parent, depth + 1))

    def _handle_element(self, element: Element, parent: NodeId, fonts: FontManager) -> NodeId:
        logger.debug(f"layout element '{element.tag_name}'")
        node = LayoutNode(tag_name=element.tag_name)

        for name, value in element.attributes.items():
            node.attributes[name] = value
            logger.debug(f"parsing attribute: {name}={value!r}")

            if name == 'style':
                node.resolved_style = Declaration.from_inline(value)
            elif name == 'id':
                node.element_id = value
            else:
                logger.debug(f"unhandled attribute '{name}'")

        return self.add_node(node, parent, fonts)

    def add_node(self, node: LayoutNode, parent: NodeId, fonts: FontManager) -> NodeId:
        """
        Insert a node into the tree, position it and measure it.

        Args:
            node: Node to insert
            parent: Id of the parent node
            fonts: FontManager providing text metrics

        Returns:
            The id of the node, to be used as the parent of its children
        """
        if node.tag_name == ROOT_TAG_NAME:
            logger.debug("update root node")
            self.arena.set(self.root_id, node)
            node_id = self.root_id
        else:
            node_id = self.arena.append(parent, node)

        node.position = self.position_node(node_id)
        node.compute_bounds(fonts, self.font_size)
        return node_id

    def position_node(self, node_id: NodeId) -> Point:
        """
        Compute the position of a node.

        Flow placement is not implemented; every node is placed at the
        origin. Subclasses can override this to place nodes.
        """
        return Point()

    @property
    def root(self) -> LayoutNode:
        return self.arena.get(self.root_id)

    def node(self, node_id: NodeId) -> LayoutNode:
        return self.arena.get(node_id)

    def parent(self, node_id: NodeId) -> Optional[NodeId]:
        return self.arena.parent(node_id)

    def children(self, node_id: NodeId) -> List[NodeId]:
        return self.arena.children(node_id)

    def nodes(self) -> List[LayoutNode]:
        """All nodes in document order."""
        return [self.arena.get(node_id) for node_id, _ in self.traverse()]

    def traverse(self) -> Iterator[Tuple[NodeId, int]]:
        """Walk the tree in document order, yielding (node id, depth) pairs."""
        return self.arena.traverse(self.root_id)

    def dump(self, indent: str = "  ") -> str:
        """
        Pretty-print the tree, one node per line, indented by depth.

        Args:
            indent: Indentation unit per level

        Returns:
            The formatted tree
        """
        return "\n".join(f"{indent * depth}{self.arena.get(node_id)!r}" for node_id, depth in self.traverse())

    def __len__(self) -> int:
        return len(self.arena)
