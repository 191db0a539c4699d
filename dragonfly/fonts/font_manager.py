"""
Font storage, lookup and glyph metrics.

Fonts are loaded with Pillow. Every generic family starts out as the
fallback font (Pillow's built-in default font) and can be replaced by system
fonts. Custom family names are looked up on demand and the most recently used
one is remembered in a single-slot memo owned by the manager.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from PIL import ImageFont

from dragonfly.css.values import CustomFontFamily, FontFamily, FontFamilyValue
from dragonfly.errors import FontLoadingError
from dragonfly.utils.config import Config

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

# Size fonts are loaded at before being resized per request
BASE_FONT_SIZE = 16

# Generic families without a font of their own
FAMILY_ALIASES = {
    FontFamily.SYSTEM_UI: FontFamily.SERIF,
    FontFamily.UI_SERIF: FontFamily.SERIF,
    FontFamily.UI_SANS_SERIF: FontFamily.SANS_SERIF,
    FontFamily.UI_MONOSPACE: FontFamily.MONOSPACE,
    FontFamily.UI_ROUNDED: FontFamily.SERIF,
    FontFamily.MATH: FontFamily.SERIF,
    FontFamily.EMOJI: FontFamily.SERIF,
    FontFamily.FANGSONG: FontFamily.SERIF,
}

LOADED_FAMILIES = (
    FontFamily.SERIF,
    FontFamily.SANS_SERIF,
    FontFamily.MONOSPACE,
    FontFamily.CURSIVE,
    FontFamily.FANTASY,
)


@dataclass(frozen=True)
class GlyphMetrics:
    """Metrics of one glyph rendered at a given pixel size."""
    width: float
    height: float
    advance_width: float


def load_font(name: str) -> Font:
    """
    Load a TrueType/OpenType font by file name or path.

    Bare file names are searched for in the system font directories.

    Args:
        name: Font file name (e.g. "DejaVuSans.ttf"), family file stem or path

    Returns:
        The loaded font

    Raises:
        FontLoadingError: If the font cannot be found or read
    """
    logger.info(f"looking for font '{name}'")
    try:
        font = ImageFont.truetype(name, BASE_FONT_SIZE)
    except OSError as e:
        raise FontLoadingError(f"failed to load font '{name}': {e}") from e

    logger.info(f"loaded font '{name}'")
    return font


class FontManager:
    """Handles font storage and lookup for the layout builder."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the font manager with the fallback font for every family.

        Args:
            config: Engine configuration
        """
        self.config = config or Config.defaults()
        self.cache_fonts: bool = self.config.get('fonts.cache_fonts', True)
        self.fallback_font: Font = ImageFont.load_default()
        self.fonts: Dict[FontFamily, Font] = {family: self.fallback_font for family in LOADED_FAMILIES}
        self._cached_font: Optional[Tuple[str, Font]] = None
        # Last resized font as (font, px, variant)
        self._sized_font: Optional[Tuple[Font, float, Font]] = None

    @classmethod
    def with_fallback_font(cls, config: Optional[Config] = None) -> 'FontManager':
        return cls(config)

    @classmethod
    def with_system_fonts(cls, config: Optional[Config] = None) -> 'FontManager':
        manager = cls(config)
        manager.load_system_fonts()
        return manager

    def load_system_fonts(self) -> None:
        """
        Load a system font for every generic family listed in ``fonts.families``.

        Raises:
            FontLoadingError: If one of the configured fonts cannot be loaded
        """
        logger.info("loading system fonts")
        families = self.config.get('fonts.families', {})

        for family_name, font_name in families.items():
            try:
                family = FontFamily(family_name)
            except ValueError:
                logger.warning(f"unknown generic font family '{family_name}' in configuration")
                continue
            self.fonts[family] = load_font(font_name)

        self._sized_font = None

    def by_name(self, name: str) -> Optional[Font]:
        """
        Get a font by family name.

        The most recently loaded font is memoized, so repeated lookups of the
        same name do not hit the file system.

        Args:
            name: Font family name

        Returns:
            The font, or None if no such font exists
        """
        if self._cached_font is not None and self._cached_font[0] == name:
            logger.debug(f"found cached font '{name}'")
            return self._cached_font[1]

        try:
            font = load_font(name)
        except FontLoadingError as e:
            logger.debug(str(e))
            return None

        if self.cache_fonts:
            self._cached_font = (name, font)
        return font

    def get_font(self, family: FontFamilyValue) -> Font:
        """
        Get the font used for a font family.

        Args:
            family: Generic or custom font family

        Returns:
            The matching font, or the fallback font for unknown custom names
        """
        if isinstance(family, CustomFontFamily):
            font = self.by_name(family.name)
            if font is None:
                logger.warning(f"could not find system font '{family.name}'")
                return self.fallback_font
            return font

        return self.fonts[FAMILY_ALIASES.get(family, family)]

    def glyph_metrics(self, glyph: str, px: float, family: FontFamilyValue) -> GlyphMetrics:
        """
        Measure one glyph.

        Args:
            glyph: Single character
            px: Font size in pixels
            family: Font family to measure with

        Returns:
            The glyph's bounding box size and advance width
        """
        font = self._sized(self.get_font(family), px)
        left, top, right, bottom = font.getbbox(glyph)
        return GlyphMetrics(
            width=float(right - left),
            height=float(bottom - top),
            advance_width=float(font.getlength(glyph)),
        )

    def _sized(self, font: Font, px: float) -> Font:
        # Bitmap fonts have a fixed size
        if not isinstance(font, ImageFont.FreeTypeFont):
            return font

        if self._sized_font is not None and self._sized_font[0] is font and self._sized_font[1] == px:
            return self._sized_font[2]

        variant = font.font_variant(size=px)
        self._sized_font = (font, px, variant)
        return variant
