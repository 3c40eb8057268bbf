"""Core utilities - errors, filename helpers and the request model."""

from ffpress.core.errors import (
    ConversionError,
    FFmpegNotFoundError,
    InvalidExtensionError,
    UnsupportedCodecError,
    format_error,
)
from ffpress.core.filename import get_extension, has_extension
from ffpress.core.request import ConversionRequest

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "FFmpegNotFoundError",
    "InvalidExtensionError",
    "UnsupportedCodecError",
    "format_error",
    "get_extension",
    "has_extension",
]
