"""Exceptions raised by the AAMVA decoder."""

from typing import Optional

from .core.elements import Element


class DecoderError(Exception):
    """Base exception for decoder errors."""
    pass


class FieldFormatError(DecoderError):
    """Raised when a field is present but its value cannot be parsed."""

    def __init__(self, element: Optional[Element], raw: str, reason: str):
        self.element = element
        self.raw = raw
        self.reason = reason
        name = element.name if element is not None else 'field'
        super().__init__(f"Malformed {name} value {raw!r}: {reason}")


class ConfigurationError(DecoderError):
    """Raised when the decoder is misconfigured."""
    pass
