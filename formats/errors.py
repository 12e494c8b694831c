"""Typed failures raised by every importer and exporter."""

from __future__ import annotations


class ConversionError(ValueError):
    pass


class UnsupportedFormatError(ConversionError):
    """Declared content type is not one of the recognized groups."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__(f"unsupported file format ({content_type})")


class DecodeError(ConversionError):
    """Input bytes do not match the grammar of the detected format."""


class EncodeError(ConversionError):
    """Canonical data could not be serialized."""
