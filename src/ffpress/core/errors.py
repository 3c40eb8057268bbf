"""Custom exceptions and error formatting for ffpress."""

from __future__ import annotations


class InvalidExtensionError(Exception):
    """Raised when an input or output path has no file extension."""

    def __init__(self, path: str) -> None:
        """Initialize InvalidExtensionError.

        Args:
            path: The path that is missing an extension.
        """
        self.path = path
        super().__init__(f"File does not have a valid extension: {path!r}")


class UnsupportedCodecError(Exception):
    """Raised when no audio codec matches the output file extension."""

    def __init__(self, extension: str | None) -> None:
        """Initialize UnsupportedCodecError.

        Args:
            extension: The offending extension, or None if the file has none.
        """
        self.extension = extension
        shown = f".{extension}" if extension is not None else "(none)"
        super().__init__(f"Unsupported audio codec for extension {shown}")


class ConversionError(Exception):
    """Raised when FFmpeg fails to run or exits with an error."""

    def __init__(self, input_path: str, message: str) -> None:
        """Initialize ConversionError.

        Args:
            input_path: Path to the input file that failed to convert.
            message: Description of the error.
        """
        self.input_path = input_path
        self.message = message
        super().__init__(f"Failed to convert {input_path}: {message}")


class FFmpegNotFoundError(Exception):
    """Raised when the FFmpeg executable cannot be found."""

    def __init__(self, executable: str = "ffmpeg") -> None:
        """Initialize FFmpegNotFoundError."""
        self.executable = executable
        super().__init__(
            f"{executable} not found. Install FFmpeg: https://ffmpeg.org/download.html"
        )


def format_error(error: Exception) -> str:
    """Format error for user display with actionable suggestion.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error message with suggestion.
    """
    if isinstance(error, InvalidExtensionError):
        return "Input and output files must have a valid extension."

    if isinstance(error, UnsupportedCodecError):
        from ffpress.convert.codecs import SUPPORTED_AUDIO_EXTENSIONS

        supported = ", ".join(sorted(SUPPORTED_AUDIO_EXTENSIONS))
        return f"{error}. Supported audio formats: {supported}"

    if isinstance(error, ConversionError):
        return f"Error during conversion: {error.message}"

    return str(error)
