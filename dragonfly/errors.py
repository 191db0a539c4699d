"""
Exceptions raised by the engine's resource collaborators.

Style parsing and layout building never raise; these types only surface
failures of fetching pages, reading local files and loading fonts.
"""


class DragonflyError(Exception):
    """Base class for all engine errors."""


class InvalidUrlError(DragonflyError):
    """A URL could not be parsed or uses an unsupported scheme."""


class NetworkError(DragonflyError):
    """An HTTP request failed."""


class LocalFileError(DragonflyError):
    """A local (file://) resource could not be read."""


class FontLoadingError(DragonflyError):
    """A font could not be found or loaded."""
