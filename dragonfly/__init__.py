"""
Dragonfly - a minimal stylesheet engine and layout tree builder.
"""

from dragonfly.css import Declaration, GlobalStyle, CSSParser, ParserMode, Dimension
from dragonfly.dom import Document, parse_document
from dragonfly.fonts import FontManager
from dragonfly.layout import Layout, LayoutNode
from dragonfly.context import WebContext, Timers

__version__ = "0.1.0"
__description__ = "A minimal stylesheet engine and layout tree builder"

__all__ = [
    'Declaration', 'GlobalStyle', 'CSSParser', 'ParserMode', 'Dimension',
    'Document', 'parse_document', 'FontManager', 'Layout', 'LayoutNode',
    'WebContext', 'Timers',
]
