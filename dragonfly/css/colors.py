"""
Color values and color-string parsing.

Parsing of the color syntax itself (keywords, hex notation, ``rgb()``,
``rgba()``, ``hsl()``) is delegated to tinycss2.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from tinycss2 import color3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An sRGB color with channels in the 0..1 range."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def rgb(self) -> tuple:
        """The color as an 8-bit (r, g, b) triple."""
        return (round(self.red * 255), round(self.green * 255), round(self.blue * 255))

    def to_hex(self) -> str:
        return '#{:02x}{:02x}{:02x}'.format(*self.rgb)

    def __str__(self) -> str:
        return self.to_hex()


def parse_color(value: str) -> Optional[Color]:
    """
    Parse a CSS color string.

    Args:
        value: Color text such as ``red``, ``#fff`` or ``rgb(255, 0, 0)``

    Returns:
        The parsed color, or None if the value is not a concrete color
    """
    parsed = color3.parse_color(value)
    if parsed is None or isinstance(parsed, str):
        # None for invalid input, the string 'currentColor' for the keyword
        logger.debug(f"could not parse color '{value}'")
        return None

    return Color(parsed.red, parsed.green, parsed.blue, parsed.alpha)
