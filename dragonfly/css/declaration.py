"""
Style declarations and stylesheets.

A :class:`Declaration` holds the style properties the engine understands for
one element or one stylesheet rule; a :class:`GlobalStyle` is the ordered list
of ``(selector, Declaration)`` rules of one stylesheet. Both the stylesheet
parser and the inline style parser apply property values through the same
resolver table, so they agree on every property's semantics.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Dict, Iterator, List, Optional, Tuple

from .colors import Color, parse_color
from .values import Dimension, Display, FontFamilyValue, Position, parse_font_family

if TYPE_CHECKING:
    from .parser import ParserMode

logger = logging.getLogger(__name__)

# Margin indices in CSS shorthand order
MARGIN_SIDES = ('top', 'right', 'bottom', 'left')


@dataclass
class Declaration:
    """
    Resolved style properties of one element or one stylesheet rule.

    Every field starts out unset (or at its default variant); only properties
    present in the source text change it.
    """
    display: Display = Display.BLOCK
    position: Position = Position.STATIC
    color: Optional[Color] = None
    background_color: Optional[Color] = None
    font_family: Optional[FontFamilyValue] = None
    margin: List[Optional[Dimension]] = field(default_factory=lambda: [None] * len(MARGIN_SIDES))

    @classmethod
    def from_inline(cls, css: str) -> 'Declaration':
        """
        Parse an inline style string such as ``"position: absolute; color: red;"``.

        Pairs are split on ``;`` and then on the first ``:``. Later pairs
        overwrite earlier ones; unknown properties are ignored.

        Args:
            css: The value of a ``style`` attribute

        Returns:
            The parsed declaration
        """
        declaration = cls()
        for pair in css.split(';'):
            key, _, value = pair.partition(':')
            key = key.strip()
            value = value.strip()

            if not key and not value:
                continue

            logger.debug(f"parsing CSS property: '{key}': '{value}'")
            apply_property(declaration, key, value)

        logger.debug(f"parsed inline style: {declaration}")
        return declaration

    def copy(self) -> 'Declaration':
        """Return an independent copy of this declaration."""
        return dataclasses.replace(self, margin=list(self.margin))

    @property
    def margin_top(self) -> Optional[Dimension]:
        return self.margin[0]

    @property
    def margin_right(self) -> Optional[Dimension]:
        return self.margin[1]

    @property
    def margin_bottom(self) -> Optional[Dimension]:
        return self.margin[2]

    @property
    def margin_left(self) -> Optional[Dimension]:
        return self.margin[3]


def _set_display(declaration: Declaration, value: str) -> None:
    declaration.display = Display.parse(value)


def _set_position(declaration: Declaration, value: str) -> None:
    declaration.position = Position.parse(value)


def _set_color(declaration: Declaration, value: str) -> None:
    declaration.color = parse_color(value)


def _set_background_color(declaration: Declaration, value: str) -> None:
    declaration.background_color = parse_color(value)


def _set_font_family(declaration: Declaration, value: str) -> None:
    declaration.font_family = parse_font_family(value)


def _set_margin(declaration: Declaration, value: str) -> None:
    for index, part in enumerate(value.split()[:len(MARGIN_SIDES)]):
        declaration.margin[index] = Dimension.parse(part)


def _margin_side_setter(index: int) -> Callable[[Declaration, str], None]:
    def setter(declaration: Declaration, value: str) -> None:
        declaration.margin[index] = Dimension.parse(value)
    return setter


PROPERTY_HANDLERS: Dict[str, Callable[[Declaration, str], None]] = {
    'display': _set_display,
    'position': _set_position,
    'color': _set_color,
    'background-color': _set_background_color,
    'font-family': _set_font_family,
    'margin': _set_margin,
}
PROPERTY_HANDLERS.update({
    f'margin-{side}': _margin_side_setter(index) for index, side in enumerate(MARGIN_SIDES)
})


def apply_property(declaration: Declaration, name: str, value: str) -> bool:
    """
    Apply one property value to a declaration.

    Args:
        declaration: Declaration to mutate
        name: Property name (case-sensitive)
        value: Property value text

    Returns:
        True if the property is known, False if it was ignored
    """
    handler = PROPERTY_HANDLERS.get(name)
    if handler is None:
        logger.warning(f"unhandled CSS property '{name}'")
        return False

    handler(declaration, value)
    return True


class GlobalStyle:
    """
    An ordered list of ``(selector, Declaration)`` rules from one stylesheet.

    Rules keep their source order; selectors are neither deduplicated nor
    ranked by specificity.
    """

    def __init__(self, rules: Optional[List[Tuple[str, Declaration]]] = None):
        self.rules: List[Tuple[str, Declaration]] = list(rules or [])

    @classmethod
    def from_css(cls, css: str, mode: Optional['ParserMode'] = None) -> 'GlobalStyle':
        """
        Parse a stylesheet.

        Args:
            css: Stylesheet text
            mode: ParserMode to parse with (NORMAL by default)

        Returns:
            The parsed stylesheet
        """
        from .parser import CSSParser, ParserMode

        return CSSParser(css, mode or ParserMode.NORMAL).parse()

    @classmethod
    def default_css(cls) -> 'GlobalStyle':
        """Get the built-in default stylesheet (parsed once, shared read-only)."""
        from .parser import load_default_stylesheet

        return load_default_stylesheet()

    def add_rule(self, selector: str, declaration: Declaration) -> None:
        self.rules.append((selector, declaration))

    def selectors(self) -> List[str]:
        return [selector for selector, _ in self.rules]

    def declarations_for(self, selector: str) -> List[Declaration]:
        """Get the declarations of every rule whose selector text equals ``selector``."""
        return [declaration for rule_selector, declaration in self.rules if rule_selector == selector]

    def __iter__(self) -> Iterator[Tuple[str, Declaration]]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Tuple[str, Declaration]:
        return self.rules[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GlobalStyle):
            return NotImplemented
        return self.rules == other.rules

    def __repr__(self) -> str:
        return f"GlobalStyle({self.rules!r})"
