#!/usr/bin/env python3
"""
Dragonfly - command line entry point.

Loads a page and prints its layout tree, or parses a stylesheet and prints
its rules.
"""

import argparse
import sys

from dragonfly.context import WebContext
from dragonfly.css import GlobalStyle, ParserMode
from dragonfly.errors import DragonflyError
from dragonfly.fonts import FontManager
from dragonfly.network import Puller
from dragonfly.utils.config import Config
from dragonfly.utils.logging import get_default_log_file, log_exception, setup_logging


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Dragonfly - a minimal stylesheet and layout engine")
    parser.add_argument('url', nargs='?', default=None, help='URL of the page to load')
    parser.add_argument('--stylesheet', type=str, default=None, help='Parse a stylesheet (URL) and print its rules')
    parser.add_argument('--default-mode', action='store_true', help='Parse the stylesheet in default-stylesheet mode')
    parser.add_argument('--dump', action='store_true', help='Print the layout tree')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', action='store_true', help='Also log to the default log file')
    parser.add_argument('--config', type=str, default=None, help='Path to the configuration file')
    return parser.parse_args(argv)


def print_stylesheet(style: GlobalStyle) -> None:
    for selector, declaration in style:
        print(f"{selector} {declaration}")


def main(argv=None) -> int:
    """Main entry point for the application."""
    args = parse_arguments(argv)
    config = Config(args.config)

    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    logger = setup_logging(
        log_file=get_default_log_file() if args.log_file else None,
        console_level=console_level,
        file_level=config.get('logging.file_level', "DEBUG"),
    )

    if not args.url and not args.stylesheet:
        print_stylesheet(GlobalStyle.default_css())
        return 0

    try:
        if args.stylesheet:
            mode = ParserMode.DEFAULT_CSS if args.default_mode else ParserMode.NORMAL
            css = Puller(config).pull_str(args.stylesheet)
            print_stylesheet(GlobalStyle.from_css(css, mode))

        if args.url:
            if config.get('fonts.system_fonts', False):
                fonts = FontManager.with_system_fonts(config)
            else:
                fonts = FontManager.with_fallback_font(config)

            context = WebContext(args.url, fonts, config)
            context.load()

            if args.dump:
                print(context.layout.dump())
            timers = context.timers
            print(f"pull {timers.pull:.4f}s, parse {timers.parse:.4f}s, "
                  f"layout {timers.layout:.4f}s, total {timers.total:.4f}s")
    except DragonflyError as e:
        log_exception(logger, e, "Failed to load")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
