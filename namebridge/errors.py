"""
Error taxonomy for the name transliteration core.

Client-caused failures (`InvalidInput`, `UnsupportedScript`) also subclass
`ValueError`. `EmptyResult` and `InvalidEncoding` indicate a defect in the core
rather than bad input.
"""

from __future__ import annotations


class NameBridgeError(Exception):
    """Base class for all errors raised by the core."""

    client_error: bool = False

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidInput(NameBridgeError, ValueError):
    """Required text is missing, empty or too long."""

    client_error = True


class UnsupportedScript(NameBridgeError, ValueError):
    """Source or target script is outside the supported set."""

    client_error = True


class EmptyResult(NameBridgeError):
    """Transliteration produced no output."""


class InvalidEncoding(NameBridgeError):
    """Output is not validly encoded text for the requested target."""
