"""
Font lookup and text metrics.
"""

from .font_manager import FontManager, GlyphMetrics, load_font

__all__ = ['FontManager', 'GlyphMetrics', 'load_font']
