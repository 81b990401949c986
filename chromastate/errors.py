"""Exceptions and warnings raised by chromastate."""


class ColorError(Exception):
    """Base class for chromastate errors."""


class ColorParseError(ColorError, ValueError):
    """Color text matched no known grammar and the named-color resolver gave up."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Can't parse color from string: {text!r}")


class HexFallbackWarning(UserWarning):
    """A hex string had no usable digits and was read as opaque black."""
