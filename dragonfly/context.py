"""
Page loading.

A WebContext pulls a page, parses it and computes its layout tree, timing
every phase.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from dragonfly.dom import Document, parse_document
from dragonfly.fonts import FontManager
from dragonfly.layout import Layout
from dragonfly.network import Puller, parse_url
from dragonfly.utils.config import Config
from dragonfly.utils.logging import PerformanceLogger

logger = logging.getLogger(__name__)


@dataclass
class Timers:
    """Page loading timers, in seconds."""
    # Time it took to pull the page
    pull: float = 0.0
    # Time it took to parse the page
    parse: float = 0.0
    # Time it took to compute the last layout
    layout: float = 0.0
    # Total time elapsed loading the page
    total: float = 0.0


class WebContext:
    """One page: its URL, parsed document and layout tree."""

    def __init__(self, url: str, font_store: FontManager,
                 config: Optional[Config] = None, puller: Optional[Puller] = None):
        """
        Initialize a context for a URL. Nothing is loaded until :meth:`load`.

        Args:
            url: Page URL
            font_store: Font storage used for text metrics
            config: Engine configuration
            puller: Resource puller (one is created from the config if omitted)

        Raises:
            InvalidUrlError: If the URL is not supported
        """
        parse_url(url)
        self.url = url
        self.config = config or Config.defaults()
        self.timers = Timers()
        self.document: Optional[Document] = None
        self.layout = Layout(config=self.config)
        self.puller = puller or Puller(self.config)
        self.font_store = font_store
        self._perf = PerformanceLogger(logger, "page")

    def load(self) -> None:
        """
        Pull, parse and lay out the page.

        Raises:
            NetworkError, LocalFileError: If the page cannot be retrieved
        """
        self._perf.start("total")

        self._perf.start("pull")
        data = self.puller.pull_str(self.url)
        self.timers.pull = self._perf.end("pull", level="INFO")

        logger.info(f"parsing page at '{self.url}'")
        self._perf.start("parse")
        self.document = parse_document(data)
        self.timers.parse = self._perf.end("parse", level="INFO")

        if self.document.quirks_mode == "quirks":
            logger.warning("using quirks mode")
        elif self.document.quirks_mode == "limited quirks":
            logger.warning("using limited quirks mode")
        else:
            logger.info("using standard mode")

        for error in self.document.errors:
            logger.warning(f"HTML parser error: {error}")

        logger.info("computing layout for the first time")
        self.recompute_layout()

        self.timers.total = self._perf.end("total", level="INFO")

    def recompute_layout(self) -> Layout:
        """
        Rebuild the layout tree from the parsed document.

        Returns:
            The new layout
        """
        if self.document is None:
            logger.warning("no document loaded, layout not computed")
            return self.layout

        logger.info("recomputing layout...")
        self._perf.start("layout")
        self.layout = Layout.compute(self.document, self.font_store, self.config)
        self.timers.layout = self._perf.end("layout", level="INFO")
        return self.layout
