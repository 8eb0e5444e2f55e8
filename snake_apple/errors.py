"""Startup failures. None of these are retried; the app exits on them."""


class SnakeAppleError(Exception):
    pass


class DisplayError(SnakeAppleError):
    """The game window could not be created."""


class AudioError(SnakeAppleError):
    """The mixer could not be opened or the music asset could not be loaded."""


class FontError(SnakeAppleError):
    """No usable font for drawing text."""
