"""
CSS parser implementation.

A single forward scan over normalized stylesheet text. Brace depth tells
selectors (depth 0) apart from declarations (inside a rule's braces). The
parser is total: malformed input degrades toward default styling and never
raises.
"""

import functools
import logging
from enum import Enum
from importlib import resources
from typing import Callable, Optional

from .declaration import Declaration, GlobalStyle, apply_property

logger = logging.getLogger(__name__)

# Internal palette of the built-in stylesheet
THEME_KEYWORDS = {
    'DfTextColor': 'black',
    'DfPageBackgroundColor': 'white',
    'DfButtonBorderColor': 'gray',
    'DfInputPlaceholderTextColor': 'gray',
    'DfButtonBackgroundColor': 'lightgray',
    'DfButtonTextColor': 'black',
    'DfLinkColor': 'lightblue',
    'DfVisitedColor': 'purple',
    'DfActiveColor': 'blue',
    'DfMarkBackgroundColor': 'lightgray',
    'DfMarkTextColor': 'yellow',
    'DfFieldsetBorderColor': 'black',
}

DEFAULT_STYLESHEET = 'default.css'


def _strip_comments_and_whitespace(css: str) -> str:
    result = []
    pos = 0
    length = len(css)

    while pos < length:
        if css.startswith('/*', pos):
            end = css.find('*/', pos + 2)
            if end == -1:
                # Unterminated comment swallows the rest of the input
                break
            pos = end + 2
            continue

        char = css[pos]
        if char.isspace():
            if not result or result[-1] != ' ':
                result.append(' ')
        else:
            result.append(char)
        pos += 1

    return ''.join(result)


def normalize(css: str) -> str:
    """
    Remove block comments and collapse whitespace runs to a single space.

    Comments do not nest. The result is never longer than the input and
    normalizing it again leaves it unchanged.

    Args:
        css: Raw stylesheet text

    Returns:
        The normalized text
    """
    previous = None
    result = css
    # Removing a comment can join a '/' and a '*' into a new comment opener
    while result != previous:
        previous = result
        result = _strip_comments_and_whitespace(previous)
    return result


def replace_theme_keywords(value: str) -> str:
    """Replace the default stylesheet's palette keywords with CSS color keywords."""
    return ' '.join(THEME_KEYWORDS.get(token, token) for token in value.split(' '))


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in '-_')


class ParserMode(Enum):
    """Parsing behaviour of the CSS parser."""
    # Regular stylesheets
    NORMAL = "normal"
    # Bare declaration lists (the contents of a style attribute)
    INLINE = "inline"
    # The built-in default stylesheet, with theme keyword substitution
    DEFAULT_CSS = "default-css"


class CSSParser:
    """
    Character-stream state machine that turns stylesheet text into a GlobalStyle.

    In ``INLINE`` mode the scan starts inside a declaration block, no rule is
    ever committed and the result is read from :attr:`declaration`.
    """

    def __init__(self, css: str, mode: ParserMode = ParserMode.NORMAL):
        """
        Initialize the parser.

        Args:
            css: Stylesheet text
            mode: Parsing mode
        """
        self.input = normalize(css)
        self.mode = mode
        self.pos = 0
        self.brace_level = 0
        self.selector: Optional[str] = None
        self.selector_level: Optional[int] = None
        self.property_name: Optional[str] = None
        self.declaration = Declaration()
        self.style = GlobalStyle()

        if mode is ParserMode.INLINE:
            self.brace_level = 1

        logger.debug(f"processed input string: '{self.input}'")

    def eof(self) -> bool:
        return self.pos >= len(self.input)

    def peek(self) -> str:
        return self.input[self.pos]

    def consume(self) -> str:
        char = self.input[self.pos]
        self.pos += 1
        return char

    def consume_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.eof() and test(self.peek()):
            self.pos += 1
        return self.input[start:self.pos]

    def consume_name(self) -> str:
        return self.consume_while(_is_name_char)

    def parse(self) -> GlobalStyle:
        """
        Run the scan to the end of the input.

        Returns:
            The rules committed so far (empty in INLINE mode)
        """
        while not self.eof():
            self.advance()

        if self.selector is not None and self.brace_level > 0:
            logger.debug(f"discarding unclosed rule '{self.selector}'")

        logger.debug(f"parsed stylesheet with {len(self.style)} rules")
        return self.style

    def advance(self) -> None:
        """Take one scanning step based on the current character."""
        char = self.peek()

        if char == '{':
            self.consume()
            self.brace_level += 1
        elif char == '}':
            self.consume()
            self._close_brace()
        elif char == ' ':
            self.consume()
        elif self.brace_level == 0:
            self._scan_selector()
        else:
            self._scan_declaration()

    @property
    def _declaration_level(self) -> int:
        return (self.selector_level or 0) + 1

    def _close_brace(self) -> None:
        previous = self.brace_level
        # Saturate: excess closing braces are ignored
        self.brace_level = max(0, previous - 1)

        if self.mode is ParserMode.INLINE:
            return

        if previous > 0 and self.brace_level == (self.selector_level or 0):
            self._commit_rule()

    def _commit_rule(self) -> None:
        if self.selector is None:
            logger.debug("discarding declaration block without selector")
        else:
            logger.debug(f"rule '{self.selector}': {self.declaration}")
            self.style.add_rule(self.selector, self.declaration)

        self.selector = None
        self.selector_level = None
        self.property_name = None
        self.declaration = Declaration()

    def _scan_selector(self) -> None:
        name = self.consume_name()
        if not name:
            # Always make progress
            self.consume()
            return

        logger.debug(f"raw selector: '{name}'")
        self.selector = name
        self.selector_level = self.brace_level

    def _scan_declaration(self) -> None:
        # Runs end at ';', ':' or a brace, so values like rgb(255, 255, 255) stay whole
        text = self.consume_while(lambda c: c not in ';:{}').strip()
        if not text:
            separator = self.consume()
            if separator == ';' and self.property_name is not None:
                logger.debug(f"property '{self.property_name}' has no value")
                self.property_name = None
            return

        if self.brace_level != self._declaration_level:
            logger.debug(f"skipping nested token '{text}'")
            return

        logger.debug(f"raw property name/value: '{text}'")
        if self.property_name is None:
            self.property_name = text
        else:
            self._apply_value(text)
            self.property_name = None

    def _apply_value(self, value: str) -> None:
        if self.mode is ParserMode.DEFAULT_CSS:
            value = replace_theme_keywords(value)

        logger.debug(f"parsing property '{self.property_name}: {value}' (mode: {self.mode.value})")
        apply_property(self.declaration, self.property_name, value)


def parse_inline(css: str) -> Declaration:
    """
    Parse a brace-less declaration list with the state machine.

    Unlike :meth:`Declaration.from_inline`, which splits each pair on its
    first ``:`` only, the scanner ends every run at a ``:``. A value holding
    a colon is cut there: ``font-family: a:b`` sets the family ``a`` and
    leaves ``b`` as a property name without a value.
    """
    parser = CSSParser(css, ParserMode.INLINE)
    parser.parse()
    return parser.declaration


@functools.lru_cache(maxsize=None)
def load_default_stylesheet() -> GlobalStyle:
    """
    Parse the packaged default stylesheet.

    The result is cached and shared; callers must treat it as read-only.
    """
    css = resources.files(__package__).joinpath(DEFAULT_STYLESHEET).read_text(encoding='utf-8')
    logger.info("parsing default stylesheet")
    return CSSParser(css, ParserMode.DEFAULT_CSS).parse()
