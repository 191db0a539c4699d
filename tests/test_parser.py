import pytest

from dragonfly.css import (
    CSSParser, CustomFontFamily, Declaration, Dimension, Display, GlobalStyle, ParserMode, Position,
    normalize, parse_color, parse_inline,
)
from dragonfly.css.parser import THEME_KEYWORDS, load_default_stylesheet, replace_theme_keywords

RED = parse_color("red")


# --- Preprocessing Tests ---

def test_normalize_strips_comments():
    assert normalize("body{/* c */color:/**/red/* c2 */;}") == "body{color:red;}"


def test_normalize_collapses_whitespace_runs():
    assert normalize("p  {\n\t color:\r\n red; }") == "p { color: red; }"


def test_normalize_unterminated_comment_drops_rest():
    assert normalize("p{} /* never closed") == "p{} "


@pytest.mark.parametrize("css", [
    "",
    "   ",
    "a /* x */ b",
    "//**/*x*/",
    "p{color:red}\n\n\tdiv { display : none }",
    "/* a /* b */ c */",
    "é  ü /*ö*/ ß",
])
def test_normalize_is_idempotent_and_never_grows(css):
    once = normalize(css)
    assert normalize(once) == once
    assert len(once) <= len(css)


def test_comments_do_not_nest():
    assert normalize("/* a /* b */ c */") == " c */"


# --- Stylesheet Tests ---

def test_stylesheet_rules_in_order():
    style = GlobalStyle.from_css("p { color: red; } div { display: flex; }")

    assert len(style) == 2
    assert style.selectors() == ["p", "div"]

    selector, declaration = style[0]
    assert selector == "p"
    assert declaration.color == RED

    selector, declaration = style[1]
    assert selector == "div"
    assert declaration.display is Display.FLEX
    assert declaration.color is None


def test_extra_closing_brace_is_ignored():
    style = GlobalStyle.from_css("p { color: red; } }")
    assert style.selectors() == ["p"]
    assert style[0][1].color == RED


def test_leading_closing_braces_do_not_underflow():
    style = GlobalStyle.from_css("}}} p { position: fixed; }")
    assert style.selectors() == ["p"]
    assert style[0][1].position is Position.FIXED


def test_unclosed_rule_is_discarded():
    style = GlobalStyle.from_css("p { color: red; } div { color: blue;")
    assert style.selectors() == ["p"]


def test_function_values_are_captured_whole():
    style = GlobalStyle.from_css("p { color: rgb(255, 0, 0); background-color: rgba(0, 0, 255, 1); }")
    declaration = style[0][1]
    assert declaration.color == RED
    assert declaration.background_color == parse_color("blue")


def test_value_without_trailing_semicolon():
    style = GlobalStyle.from_css("p{color:red}")
    assert style[0][1].color == RED


def test_comments_inside_rules():
    style = GlobalStyle.from_css("p { /* note */ color: /* x */ red; }")
    assert style[0][1].color == RED


def test_property_without_value_is_dropped():
    style = GlobalStyle.from_css("p { color; display: flex; }")
    declaration = style[0][1]
    assert declaration.color is None
    assert declaration.display is Display.FLEX


def test_unknown_properties_are_skipped():
    style = GlobalStyle.from_css("p { flibber: 3; position: relative; }")
    assert style[0][1] == Declaration(position=Position.RELATIVE)


def test_margin_shorthand_in_stylesheet():
    style = GlobalStyle.from_css("p { margin: 1px 2px 3px 4px; }")
    assert style[0][1].margin == [
        Dimension.absolute(1.0),
        Dimension.absolute(2.0),
        Dimension.absolute(3.0),
        Dimension.absolute(4.0),
    ]


def test_selector_punctuation_is_skipped():
    style = GlobalStyle.from_css(".note { display: none; } #main { display: grid; }")
    assert style.selectors() == ["note", "main"]


def test_duplicate_selectors_are_kept():
    style = GlobalStyle.from_css("p { color: red; } p { color: blue; }")
    assert style.selectors() == ["p", "p"]
    assert [d.color for d in style.declarations_for("p")] == [RED, parse_color("blue")]


def test_non_ascii_input():
    style = GlobalStyle.from_css("pé { font-family: Ünïcödé; } div { color: red; }")
    assert style.selectors() == ["p", "div"]
    assert style[0][1].font_family == CustomFontFamily("Ünïcödé")
    assert style[1][1].color == RED


def test_empty_and_garbage_input():
    assert len(GlobalStyle.from_css("")) == 0
    assert len(GlobalStyle.from_css(";;;:::")) == 0
    assert len(GlobalStyle.from_css("{ color: red; }")) == 0


# --- Mode Tests ---

def test_default_mode_replaces_theme_keywords():
    css = "a { color: DfLinkColor; background-color: DfPageBackgroundColor; }"

    default = GlobalStyle.from_css(css, ParserMode.DEFAULT_CSS)[0][1]
    assert default.color == parse_color("lightblue")
    assert default.background_color == parse_color("white")

    normal = GlobalStyle.from_css(css, ParserMode.NORMAL)[0][1]
    assert normal.color is None
    assert normal.background_color is None


def test_replace_theme_keywords():
    assert replace_theme_keywords("DfTextColor") == "black"
    assert replace_theme_keywords("1px solid DfButtonBorderColor") == "1px solid gray"
    assert replace_theme_keywords("red") == "red"
    assert all(parse_color(color) is not None for color in THEME_KEYWORDS.values())


def test_inline_mode_parses_bare_declarations():
    parser = CSSParser("position: absolute; color: red;", ParserMode.INLINE)
    style = parser.parse()

    assert len(style) == 0
    assert parser.declaration == Declaration(position=Position.ABSOLUTE, color=RED)


def test_inline_mode_agrees_with_inline_parsing():
    css = "display: inline-block; margin: 1em 2px; font-family: monospace; color: blue"
    assert parse_inline(css) == Declaration.from_inline(css)


def test_inline_mode_cuts_values_at_colons():
    css = "font-family: a:b"

    assert parse_inline(css) == Declaration(font_family=CustomFontFamily("a"))
    assert Declaration.from_inline(css) == Declaration(font_family=CustomFontFamily("a:b"))


def test_default_stylesheet():
    style = load_default_stylesheet()

    html = style.declarations_for("html")[0]
    assert html.color == parse_color("black")
    assert html.background_color == parse_color("white")

    assert style.declarations_for("a")[0].color == parse_color("lightblue")
    assert style.declarations_for("head")[0].display is Display.NONE
    assert GlobalStyle.default_css() is style
