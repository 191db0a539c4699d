"""
CSS implementation for the engine.
This package provides the style model and the hand-written stylesheet parser.
"""

from .values import (
    Unit, UnitKind, Dimension, Position, Display, FontFamily, CustomFontFamily,
    FontFamilyValue, parse_font_family,
)
from .colors import Color, parse_color
from .declaration import Declaration, GlobalStyle, apply_property, PROPERTY_HANDLERS
from .parser import CSSParser, ParserMode, normalize, parse_inline, load_default_stylesheet

__all__ = [
    'Unit', 'UnitKind', 'Dimension', 'Position', 'Display', 'FontFamily', 'CustomFontFamily',
    'FontFamilyValue', 'parse_font_family', 'Color', 'parse_color', 'Declaration', 'GlobalStyle',
    'apply_property', 'PROPERTY_HANDLERS', 'CSSParser', 'ParserMode', 'normalize', 'parse_inline',
    'load_default_stylesheet',
]
