"""
Layout node: one element's (or text run's) styled, positioned representation.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict

from dragonfly.css.declaration import Declaration
from dragonfly.css.values import FontFamily
from dragonfly.fonts.font_manager import FontManager

logger = logging.getLogger(__name__)

ROOT_TAG_NAME = "html"

_WHITESPACE_RUN = re.compile(r'\s+')


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace characters with a single space."""
    return _WHITESPACE_RUN.sub(' ', text)


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass
class LayoutNode:
    """
    A node of the layout tree.

    Element nodes carry a tag name, their attributes and the declaration
    parsed from their own ``style`` attribute. Text nodes have an empty tag
    name and carry a run of text from their parent element instead.
    """
    tag_name: str = ""
    position: Point = Point()
    attributes: Dict[str, str] = field(default_factory=dict)
    element_id: str = ""
    resolved_style: Declaration = field(default_factory=Declaration)
    text: str = ""
    size: Size = Size()

    @classmethod
    def root(cls) -> 'LayoutNode':
        """The root node, named for the document root element."""
        return cls(tag_name=ROOT_TAG_NAME)

    @classmethod
    def text_node(cls, text: str) -> 'LayoutNode':
        node = cls()
        node.set_text(text)
        return node

    @property
    def is_text(self) -> bool:
        return not self.tag_name

    def set_text(self, text: str) -> None:
        """Set the node's text with whitespace runs collapsed to one space."""
        self.text = collapse_whitespace(text)
        logger.debug(f"set node text: '{self.text}'")

    def compute_bounds(self, fonts: FontManager, px: float) -> Size:
        """
        Estimate the size of the node's text.

        Only the width is measured (the sum of every glyph's width and
        advance); line breaking and height are not computed.

        Args:
            fonts: FontManager providing glyph metrics
            px: Font size in pixels

        Returns:
            The estimated size
        """
        family = self.resolved_style.font_family or FontFamily.SERIF
        width = 0.0
        for char in self.text:
            metrics = fonts.glyph_metrics(char, px, family)
            width += metrics.width + metrics.advance_width

        self.size = Size(width, 0.0)
        logger.debug(f"calculated node bounds: {self.size}")
        return self.size

    def __repr__(self) -> str:
        if self.is_text:
            return f"Text({self.text!r}, pos=({self.position.x:g}, {self.position.y:g}), width={self.size.width:g})"

        parts = [self.tag_name]
        if self.element_id:
            parts.append(f"id={self.element_id!r}")
        parts.append(f"pos=({self.position.x:g}, {self.position.y:g})")
        parts.append(f"display={self.resolved_style.display.value}")
        parts.append(f"position={self.resolved_style.position.value}")
        if self.resolved_style.color is not None:
            parts.append(f"color={self.resolved_style.color}")
        if self.resolved_style.background_color is not None:
            parts.append(f"background-color={self.resolved_style.background_color}")
        if self.resolved_style.font_family is not None:
            parts.append(f"font-family={self.resolved_style.font_family}")
        return f"Element({', '.join(parts)})"
