"""
Flat node storage for trees.

Nodes live in a list and refer to their parent and children by index, so the
layout tree can be mutated in place without nodes holding references to
each other.
"""

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar('T')

NodeId = int


class NodeArena(Generic[T]):
    """A tree stored as a table of values with index links."""

    def __init__(self):
        self._values: List[T] = []
        self._parents: List[Optional[NodeId]] = []
        self._children: List[List[NodeId]] = []

    def new_node(self, value: T) -> NodeId:
        """
        Add a detached node.

        Args:
            value: Node value

        Returns:
            The id of the new node
        """
        self._values.append(value)
        self._parents.append(None)
        self._children.append([])
        return len(self._values) - 1

    def append(self, parent: NodeId, value: T) -> NodeId:
        """
        Add a node as the last child of ``parent``.

        Args:
            parent: Id of the parent node
            value: Node value

        Returns:
            The id of the new node
        """
        node_id = self.new_node(value)
        self._parents[node_id] = parent
        self._children[parent].append(node_id)
        return node_id

    def get(self, node_id: NodeId) -> T:
        return self._values[node_id]

    def set(self, node_id: NodeId, value: T) -> None:
        self._values[node_id] = value

    def parent(self, node_id: NodeId) -> Optional[NodeId]:
        return self._parents[node_id]

    def children(self, node_id: NodeId) -> List[NodeId]:
        return list(self._children[node_id])

    def traverse(self, node_id: NodeId) -> Iterator[Tuple[NodeId, int]]:
        """
        Walk a subtree depth-first in document order.

        Args:
            node_id: Id of the subtree root

        Yields:
            (node id, depth relative to ``node_id``) pairs
        """
        stack = [(node_id, 0)]
        while stack:
            current, depth = stack.pop()
            yield current, depth
            for child in reversed(self._children[current]):
                stack.append((child, depth + 1))

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)
