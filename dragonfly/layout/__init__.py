"""
Layout tree construction.
"""

from .arena import NodeArena, NodeId
from .node import LayoutNode, Point, Size, collapse_whitespace
from .layout import Layout

__all__ = ['NodeArena', 'NodeId', 'LayoutNode', 'Point', 'Size', 'collapse_whitespace', 'Layout']
