"""
HTML document parsing.

HTML is parsed with html5lib and converted into the engine's own read-only
node tree.
"""

import logging
from typing import List, Tuple

import html5lib

from .node import Comment, Document, Element, Node, Text

logger = logging.getLogger(__name__)

# minidom node types
_ELEMENT_NODE = 1
_TEXT_NODE = 3
_COMMENT_NODE = 8
_DOCUMENT_TYPE_NODE = 10


def parse_document(html_content: str) -> Document:
    """
    Parse HTML content into a Document.

    Args:
        html_content: The HTML content to parse

    Returns:
        The parsed Document, with the parser's errors and quirks mode recorded
    """
    logger.debug(f"Parsing HTML content (first 100 chars): {html_content[:100]}...")

    parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
    parsed = parser.parse(html_content)

    document = Document()
    document.quirks_mode = parser.compatMode
    document.errors = [_format_error(error) for error in parser.errors]

    _convert_tree(parsed, document)

    logger.debug(f"Parsed document: {document}")
    return document


def _format_error(error) -> str:
    position, code, data = error
    return f"{code} at {position[0]}:{position[1]} {data or ''}".rstrip()


def _convert_tree(parsed, document: Document) -> None:
    """
    Convert the children of a parsed minidom document and attach them to ``document``.

    Uses an explicit stack, so arbitrarily deep documents convert without
    hitting the recursion limit.

    Args:
        parsed: The parsed minidom document from html5lib
        document: The document to fill
    """
    stack: List[Tuple[object, Node]] = []
    for child in reversed(parsed.childNodes):
        if child.nodeType == _DOCUMENT_TYPE_NODE:
            document.doctype = child.name
        else:
            stack.append((child, document))

    while stack:
        node, parent = stack.pop()
        if node.nodeType == _ELEMENT_NODE:
            element = parent.append_child(Element(node.tagName, dict(node.attributes.items())))
            for child in reversed(node.childNodes):
                stack.append((child, element))
        elif node.nodeType == _TEXT_NODE:
            parent.append_child(Text(node.data))
        elif node.nodeType == _COMMENT_NODE:
            parent.append_child(Comment(node.data))
        else:
            logger.debug(f"Skipping parsed node of type {node.nodeType}")
