"""A simple FFmpeg wrapper for extracting audio, compressing and converting media."""

from ffpress.core import (
    ConversionError,
    FFmpegNotFoundError,
    InvalidExtensionError,
    UnsupportedCodecError,
)

__version__ = "0.1.0"
__metadata__ = {
    "name": "ffpress",
    "version": __version__,
    "license": "MIT",
    "python": ">=3.12",
}
__all__ = [
    "ConversionError",
    "FFmpegNotFoundError",
    "InvalidExtensionError",
    "UnsupportedCodecError",
    "__metadata__",
    "__version__",
]
