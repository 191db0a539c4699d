import logging

import pytest

from dragonfly.fonts.font_manager import GlyphMetrics
from dragonfly.utils.logging import ROOT_LOGGER_NAME


class FixedFonts:
    """Font store where every glyph measures 1x1 with an advance of 2."""

    def __init__(self):
        self.measured = []

    def glyph_metrics(self, glyph, px, family):
        self.measured.append((glyph, px, family))
        return GlyphMetrics(width=1.0, height=1.0, advance_width=2.0)


@pytest.fixture
def fonts():
    return FixedFonts()


@pytest.fixture
def reset_logging():
    """Undo handlers and levels set by setup_logging()."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
