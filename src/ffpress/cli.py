"""CLI implementation for ffpress."""

from __future__ import annotations

from typing import Annotated

import typer

from ffpress import __version__
from ffpress.convert import (
    DEFAULT_FFMPEG,
    LaunchFailure,
    Operation,
    Outcome,
    transcode,
)
from ffpress.core import (
    ConversionError,
    ConversionRequest,
    FFmpegNotFoundError,
    InvalidExtensionError,
    UnsupportedCodecError,
    format_error,
)
from ffpress.ui import configure_logging, print_error, print_info, print_success

# Create Typer app
app = typer.Typer(
    name="ffpress",
    help="A simple FFmpeg wrapper: extract audio, compress or convert media files.",
    add_completion=False,
    no_args_is_help=True,
)


def report_outcome(outcome: Outcome, request: ConversionRequest, ffmpeg: str) -> int:
    """Print the result of an FFmpeg run and pick the process exit code.

    Both failure kinds are shown as a conversion error; a missing executable
    additionally gets an install hint.

    Args:
        outcome: The classified FFmpeg result.
        request: The request that produced it.
        ffmpeg: Executable that was invoked.

    Returns:
        Exit code (0 = success, 1 = failure).
    """
    if outcome.ok:
        print_success(outcome.describe())
        return 0

    print_error(format_error(ConversionError(request.input_path, outcome.describe())))
    if isinstance(outcome, LaunchFailure) and isinstance(
        outcome.error, FileNotFoundError
    ):
        print_error(format_error(FFmpegNotFoundError(ffmpeg)))
    return 1


def run_operation(
    operation: Operation,
    input_file: str,
    output_file: str,
    ffmpeg: str = DEFAULT_FFMPEG,
    overwrite: bool = False,
) -> int:
    """Validate the paths and run a single operation.

    Args:
        operation: Which conversion to perform.
        input_file: Path to the input file.
        output_file: Path to the output file.
        ffmpeg: Executable to invoke.
        overwrite: Whether FFmpeg may replace an existing output file.

    Returns:
        Exit code (0 = success, 1 = failure).
    """
    try:
        request = ConversionRequest.from_paths(input_file, output_file)
        print_info(f"{operation.value}: {input_file} → {output_file}")
        outcome = transcode(operation, request, ffmpeg=ffmpeg, overwrite=overwrite)
    except (InvalidExtensionError, UnsupportedCodecError) as e:
        print_error(format_error(e))
        return 1

    return report_outcome(outcome, request, ffmpeg)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print(f"ffpress version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    operation: Annotated[
        Operation,
        typer.Argument(
            help="The operation to perform.",
            show_default=False,
        ),
    ],
    input_file: Annotated[
        str,
        typer.Argument(help="Path to the input file.", show_default=False),
    ],
    output_file: Annotated[
        str,
        typer.Argument(help="Path to the output file.", show_default=False),
    ],
    ffmpeg: Annotated[
        str,
        typer.Option(
            "--ffmpeg",
            help="FFmpeg executable to invoke.",
        ),
    ] = DEFAULT_FFMPEG,
    overwrite: Annotated[
        bool,
        typer.Option(
            "--overwrite",
            "-y",
            help="Overwrite the output file if it already exists.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-V",
            help="Show debug logging, including the FFmpeg command.",
        ),
    ] = False,
    version: Annotated[  # noqa: ARG001
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Run FFmpeg to extract audio, compress a video or convert a file."""
    configure_logging(verbose)

    exit_code = run_operation(
        operation=operation,
        input_file=input_file,
        output_file=output_file,
        ffmpeg=ffmpeg,
        overwrite=overwrite,
    )

    raise typer.Exit(code=exit_code)


if __name__ == "__main__":
    app()
