"""
Parsed document tree consumed by the layout builder.
"""

from .node import Node, NodeType, Element, Text, Comment, Document
from .document import parse_document

__all__ = ['Node', 'NodeType', 'Element', 'Text', 'Comment', 'Document', 'parse_document']
