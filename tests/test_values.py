import logging

import pytest

from dragonfly.css.values import (
    CustomFontFamily, Dimension, Display, FontFamily, Position, Unit, UnitKind, parse_font_family,
)


# --- Dimension Tests ---

def test_dimension_inches_convert_to_pixels():
    dimension = Dimension.parse("1in")
    assert dimension.number == 96.0
    assert dimension.unit == Unit.absolute(96.0)


def test_dimension_millimeters_convert_to_pixels():
    dimension = Dimension.parse("10mm")
    assert dimension.number == pytest.approx(37.795, abs=1e-3)
    assert dimension.unit.is_absolute


def test_dimension_other_absolute_units():
    assert Dimension.parse("12px").number == 12.0
    assert Dimension.parse("72pt").number == pytest.approx(96.0)
    assert Dimension.parse("1pc").number == pytest.approx(16.0)
    assert Dimension.parse("2.54cm").number == pytest.approx(96.0)


def test_dimension_relative_units_keep_magnitude():
    dimension = Dimension.parse("1.5em")
    assert dimension.number == 1.5
    assert dimension.unit == Unit(UnitKind.RELATIVE_TO_PARENT_FONT_SIZE, 1.5)

    assert Dimension.parse("2rem").unit.kind is UnitKind.RELATIVE_TO_ROOT_FONT_SIZE
    assert Dimension.parse("3ex").unit.kind is UnitKind.RELATIVE_TO_PARENT_FONT_HEIGHT
    assert Dimension.parse("4ch").unit.kind is UnitKind.RELATIVE_TO_GLYPH0_WIDTH
    assert Dimension.parse("1lh").unit.kind is UnitKind.RELATIVE_TO_LINE_HEIGHT


def test_dimension_to_px():
    assert Dimension.parse("2em").to_px(font_size=10.0) == 20.0
    assert Dimension.parse("1.5rem").to_px(root_font_size=20.0) == 30.0
    assert Dimension.parse("2ex").to_px(font_size=10.0) == 10.0
    assert Dimension.parse("2ch").to_px(zero_width=7.0) == 14.0
    assert Dimension.parse("1in").to_px(font_size=50.0) == 96.0


def test_dimension_unknown_unit_falls_back_to_pixels(caplog):
    with caplog.at_level(logging.WARNING, logger="dragonfly.css.values"):
        dimension = Dimension.parse("5furlongs")
    assert dimension == Dimension.absolute(5.0)
    assert "furlongs" in caplog.text


def test_dimension_unparseable_number_is_zero():
    assert Dimension.parse("auto") == Dimension.absolute(0.0)
    assert Dimension.parse("") == Dimension.absolute(0.0)


def test_dimension_unitless_zero():
    assert Dimension.parse("0") == Dimension.absolute(0.0)


def test_default_unit_is_zero_pixels():
    assert Unit() == Unit.absolute(0.0)
    assert Dimension().unit.is_absolute


# --- Keyword Tests ---

def test_position_keywords():
    assert Position.parse("absolute") is Position.ABSOLUTE
    assert Position.parse("sticky") is Position.STICKY


def test_position_is_case_sensitive_and_falls_back_to_static():
    assert Position.parse("ABSOLUTE") is Position.STATIC
    assert Position.parse("nowhere") is Position.STATIC


def test_display_keywords():
    assert Display.parse("inline-flex") is Display.INLINE_FLEX
    assert Display.parse("flow-root") is Display.FLOW_ROOT
    assert Display.parse("none") is Display.NONE
    assert Display.parse("wobbly") is Display.BLOCK


def test_font_family_generic_and_custom():
    assert parse_font_family("monospace") is FontFamily.MONOSPACE
    assert parse_font_family("ui-rounded") is FontFamily.UI_ROUNDED
    assert parse_font_family("Comic Sans MS") == CustomFontFamily("Comic Sans MS")
