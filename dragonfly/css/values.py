"""
CSS value types understood by the style engine.

This module holds the keyword enums (position, display, font family) and the
length model (units and dimensions) together with their parsing rules.
Parsing never raises: unknown keywords fall back to the documented default
variant and malformed lengths fall back to absolute pixel values.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

# CSS reference pixel density
PX_PER_INCH = 96.0

# Absolute units and their size in pixels
ABSOLUTE_UNITS = {
    'px': 1.0,
    'in': PX_PER_INCH,
    'cm': PX_PER_INCH / 2.54,
    'mm': PX_PER_INCH / 25.4,
    'q': PX_PER_INCH / 101.6,
    'pt': PX_PER_INCH / 72.0,
    'pc': PX_PER_INCH / 6.0,
}

_NUMBER_PATTERN = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)(.*?)\s*$')


class UnitKind(Enum):
    """What a length is measured against."""
    ABSOLUTE = "absolute"
    RELATIVE_TO_PARENT_FONT_SIZE = "em"
    RELATIVE_TO_PARENT_FONT_HEIGHT = "ex"
    RELATIVE_TO_GLYPH0_WIDTH = "ch"
    RELATIVE_TO_ROOT_FONT_SIZE = "rem"
    RELATIVE_TO_LINE_HEIGHT = "lh"


RELATIVE_UNITS = {kind.value: kind for kind in UnitKind if kind is not UnitKind.ABSOLUTE}


@dataclass(frozen=True)
class Unit:
    """
    A CSS unit tagged with its magnitude.

    Absolute units carry their size already converted to pixels; relative
    units carry the raw multiplier of their reference size.
    """
    kind: UnitKind = UnitKind.ABSOLUTE
    value: float = 0.0

    @classmethod
    def absolute(cls, px: float) -> 'Unit':
        return cls(UnitKind.ABSOLUTE, px)

    @property
    def is_absolute(self) -> bool:
        return self.kind is UnitKind.ABSOLUTE

    def __str__(self) -> str:
        if self.is_absolute:
            return f"{self.value:g}px"
        return f"{self.value:g}{self.kind.value}"


@dataclass(frozen=True)
class Dimension:
    """A CSS length: a number and the unit it is expressed in."""
    number: float = 0.0
    unit: Unit = Unit()

    @classmethod
    def absolute(cls, px: float) -> 'Dimension':
        """Create a pixel length."""
        return cls(px, Unit.absolute(px))

    @classmethod
    def parse(cls, text: str) -> 'Dimension':
        """
        Parse a length such as ``12px``, ``1.5em`` or ``10mm``.

        Absolute units are converted to pixels. Unknown unit suffixes fall
        back to pixels with a warning and an unparseable number yields
        ``0px``.

        Args:
            text: CSS length text

        Returns:
            The parsed dimension
        """
        match = _NUMBER_PATTERN.match(text)
        if not match:
            logger.debug(f"could not parse dimension number in '{text}', using 0px")
            return cls.absolute(0.0)

        number = float(match.group(1))
        suffix = match.group(2).strip().lower()

        if suffix in ABSOLUTE_UNITS:
            return cls.absolute(number * ABSOLUTE_UNITS[suffix])

        if suffix in RELATIVE_UNITS:
            return cls(number, Unit(RELATIVE_UNITS[suffix], number))

        if suffix or number != 0.0:
            logger.warning(f"unknown unit '{suffix}' in dimension '{text}', treating as px")
        return cls.absolute(number)

    def to_px(self,
              font_size: float = 16.0,
              root_font_size: float = 16.0,
              x_height: Optional[float] = None,
              zero_width: Optional[float] = None,
              line_height: Optional[float] = None) -> float:
        """
        Resolve this length to pixels.

        Args:
            font_size: Font size of the parent element in px
            root_font_size: Font size of the root element in px
            x_height: Height of the parent font's "x" glyph, defaults to 0.5em
            zero_width: Advance of the parent font's "0" glyph, defaults to 0.5em
            line_height: Line height of the element, defaults to 1.2em

        Returns:
            The length in pixels
        """
        kind = self.unit.kind
        if kind is UnitKind.ABSOLUTE:
            return self.unit.value
        if kind is UnitKind.RELATIVE_TO_PARENT_FONT_SIZE:
            return self.number * font_size
        if kind is UnitKind.RELATIVE_TO_PARENT_FONT_HEIGHT:
            return self.number * (x_height if x_height is not None else font_size * 0.5)
        if kind is UnitKind.RELATIVE_TO_GLYPH0_WIDTH:
            return self.number * (zero_width if zero_width is not None else font_size * 0.5)
        if kind is UnitKind.RELATIVE_TO_ROOT_FONT_SIZE:
            return self.number * root_font_size
        return self.number * (line_height if line_height is not None else font_size * 1.2)

    def __str__(self) -> str:
        return str(self.unit)


class Position(Enum):
    """CSS position property values."""
    STATIC = "static"
    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    FIXED = "fixed"
    STICKY = "sticky"

    @classmethod
    def parse(cls, value: str) -> 'Position':
        """Parse a position keyword (case-sensitive), falling back to ``static``."""
        try:
            return cls(value)
        except ValueError:
            logger.debug(f"invalid position '{value}', using static")
            return cls.STATIC


class Display(Enum):
    """CSS display property values."""
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    FLEX = "flex"
    INLINE_FLEX = "inline-flex"
    GRID = "grid"
    INLINE_GRID = "inline-grid"
    FLOW_ROOT = "flow-root"
    NONE = "none"
    CONTENTS = "contents"

    @classmethod
    def parse(cls, value: str) -> 'Display':
        """Parse a display keyword (case-sensitive), falling back to ``block``."""
        try:
            return cls(value)
        except ValueError:
            logger.debug(f"invalid display '{value}', using block")
            return cls.BLOCK


class FontFamily(Enum):
    """CSS generic font families."""
    SERIF = "serif"
    SANS_SERIF = "sans-serif"
    MONOSPACE = "monospace"
    CURSIVE = "cursive"
    FANTASY = "fantasy"
    SYSTEM_UI = "system-ui"
    UI_SERIF = "ui-serif"
    UI_SANS_SERIF = "ui-sans-serif"
    UI_MONOSPACE = "ui-monospace"
    UI_ROUNDED = "ui-rounded"
    MATH = "math"
    EMOJI = "emoji"
    FANGSONG = "fangsong"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomFontFamily:
    """A font family referenced by name instead of a generic keyword."""
    name: str

    def __str__(self) -> str:
        return self.name


FontFamilyValue = Union[FontFamily, CustomFontFamily]


def parse_font_family(value: str) -> FontFamilyValue:
    """
    Parse a font-family value.

    Generic family keywords map to :class:`FontFamily`; anything else is kept
    verbatim as a :class:`CustomFontFamily`.
    """
    try:
        return FontFamily(value)
    except ValueError:
        return CustomFontFamily(value)
