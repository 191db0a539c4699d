import typing
from typing import Optional

from dragonfly.css import (
    CustomFontFamily, Declaration, Dimension, Display, FontFamily, GlobalStyle, ParserMode, Position,
    UnitKind, apply_property, parse_color,
)


# --- Inline Style Tests ---

def test_inline_position_and_color():
    declaration = Declaration.from_inline("position: absolute; color: red;")
    assert declaration == Declaration(position=Position.ABSOLUTE, color=parse_color("red"))


def test_inline_without_trailing_semicolon():
    declaration = Declaration.from_inline("color: yellow")
    assert declaration == Declaration(color=parse_color("yellow"))


def test_inline_unknown_property_is_noop():
    assert Declaration.from_inline("flibber: 3; color: blue;") == Declaration.from_inline("color: blue;")


def test_inline_later_property_wins():
    declaration = Declaration.from_inline("color: red; color: blue")
    assert declaration.color == parse_color("blue")


def test_inline_empty_input():
    assert Declaration.from_inline("") == Declaration()
    assert Declaration.from_inline(" ; ;; ") == Declaration()


def test_inline_value_splits_on_first_colon():
    declaration = Declaration.from_inline("font-family: a:b")
    assert declaration.font_family == CustomFontFamily("a:b")


def test_inline_names_are_case_sensitive():
    assert Declaration.from_inline("COLOR: red") == Declaration()


# --- Property Resolver Tests ---

def test_margin_shorthand_is_positional():
    declaration = Declaration.from_inline("margin: 1px 2px 3px 4px;")
    assert declaration.margin == [
        Dimension.absolute(1.0),
        Dimension.absolute(2.0),
        Dimension.absolute(3.0),
        Dimension.absolute(4.0),
    ]
    assert declaration.margin_top == Dimension.absolute(1.0)
    assert declaration.margin_left == Dimension.absolute(4.0)


def test_margin_shorthand_with_fewer_values():
    declaration = Declaration.from_inline("margin: 5px 1em")
    assert declaration.margin[0] == Dimension.absolute(5.0)
    assert declaration.margin[1].unit.kind is UnitKind.RELATIVE_TO_PARENT_FONT_SIZE
    assert declaration.margin[2] is None
    assert declaration.margin[3] is None


def test_margin_shorthand_ignores_extra_values():
    declaration = Declaration.from_inline("margin: 1px 2px 3px 4px 5px")
    assert len(declaration.margin) == 4
    assert declaration.margin[3] == Dimension.absolute(4.0)


def test_margin_sides():
    declaration = Declaration.from_inline("margin-right: 2px; margin-bottom: 1in")
    assert declaration.margin == [None, Dimension.absolute(2.0), Dimension.absolute(96.0), None]


def test_invalid_values_fall_back():
    declaration = Declaration.from_inline(
        "display: wobbly; position: sideways; color: notacolor; background-color: #12"
    )
    assert declaration == Declaration()
    assert declaration.display is Display.BLOCK
    assert declaration.position is Position.STATIC


def test_background_color_and_font_family():
    declaration = Declaration.from_inline("background-color: #00ff00; font-family: sans-serif")
    assert declaration.background_color == parse_color("lime")
    assert declaration.font_family is FontFamily.SANS_SERIF


def test_apply_property_reports_unknown_properties():
    declaration = Declaration()
    assert apply_property(declaration, "display", "grid") is True
    assert apply_property(declaration, "float", "left") is False
    assert declaration.display is Display.GRID


def test_copy_is_independent():
    original = Declaration.from_inline("margin-top: 1px")
    duplicate = original.copy()
    duplicate.margin[0] = None

    assert original.margin[0] == Dimension.absolute(1.0)
    assert duplicate != original


def test_color_hex():
    color = Declaration.from_inline("color: #ff8000").color
    assert color.rgb == (255, 128, 0)
    assert color.to_hex() == "#ff8000"


# --- GlobalStyle Tests ---

def test_global_style_rules():
    style = GlobalStyle()
    style.add_rule("p", Declaration(display=Display.INLINE))
    style.add_rule("div", Declaration())

    assert list(style) == [("p", Declaration(display=Display.INLINE)), ("div", Declaration())]
    assert style.declarations_for("span") == []
    assert style == GlobalStyle([("p", Declaration(display=Display.INLINE)), ("div", Declaration())])


def test_from_css_mode_is_a_parser_mode():
    hints = typing.get_type_hints(GlobalStyle.from_css, localns={"ParserMode": ParserMode})
    assert hints["mode"] == Optional[ParserMode]
