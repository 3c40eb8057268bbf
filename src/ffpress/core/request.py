"""Conversion request model."""

from __future__ import annotations

from dataclasses import dataclass

from ffpress.core.errors import InvalidExtensionError
from ffpress.core.filename import has_extension


@dataclass(frozen=True)
class ConversionRequest:
    """An input/output pair for a single FFmpeg invocation.

    Attributes:
        input_path: Path to the source media file.
        output_path: Path FFmpeg writes the result to.
    """

    input_path: str
    output_path: str

    def validate(self) -> None:
        """Ensure both paths carry a file extension.

        Raises:
            InvalidExtensionError: If either path has no extension.
        """
        for path in (self.input_path, self.output_path):
            if not has_extension(path):
                raise InvalidExtensionError(path)

    @classmethod
    def from_paths(cls, input_path: str, output_path: str) -> ConversionRequest:
        """Create a validated request.

        Raises:
            InvalidExtensionError: If either path has no extension.
        """
        request = cls(input_path=input_path, output_path=output_path)
        request.validate()
        return request
