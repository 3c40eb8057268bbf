"""FFmpeg command construction and execution."""

from __future__ import annotations

import logging
import shlex
import subprocess  # nosec B404
from enum import Enum
from typing import TYPE_CHECKING

from ffpress.convert.codecs import resolve_audio_codec
from ffpress.convert.outcome import LaunchFailure, ProcessFailure, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ffpress.convert.outcome import Outcome
    from ffpress.core import ConversionRequest

logger = logging.getLogger(__name__)

DEFAULT_FFMPEG = "ffmpeg"

# Fixed compression preset (H.265)
COMPRESS_CODEC = "libx265"
COMPRESS_CRF = 23
COMPRESS_PRESET = "medium"


class Operation(str, Enum):
    """The conversion modes selectable on the command line."""

    EXTRACT_AUDIO = "get-audio"
    COMPRESS = "compress"
    CONVERT = "convert"


def build_command(
    operation: Operation,
    request: ConversionRequest,
    *,
    ffmpeg: str = DEFAULT_FFMPEG,
    overwrite: bool = False,
) -> list[str]:
    """Build the FFmpeg argument list for an operation.

    Args:
        operation: Which conversion to perform.
        request: Input and output paths.
        ffmpeg: Executable to invoke.
        overwrite: Pass ``-y`` so FFmpeg replaces an existing output file.

    Returns:
        The full command, executable first.

    Raises:
        UnsupportedCodecError: If extracting audio to an unsupported format.
    """
    cmd = [ffmpeg]
    if overwrite:
        cmd.append("-y")

    cmd.extend(["-i", request.input_path])

    if operation is Operation.EXTRACT_AUDIO:
        codec = resolve_audio_codec(request.output_path)
        cmd.extend(["-vn", "-acodec", codec])
    elif operation is Operation.COMPRESS:
        cmd.extend(
            [
                "-c:v",
                COMPRESS_CODEC,
                "-crf",
                str(COMPRESS_CRF),
                "-preset",
                COMPRESS_PRESET,
            ]
        )

    cmd.append(request.output_path)
    return cmd


def run_command(cmd: Sequence[str]) -> Outcome:
    """Run a command to completion and classify its exit.

    The call blocks until the process exits. FFmpeg's own output goes
    straight to the terminal.

    Args:
        cmd: Command and arguments.

    Returns:
        Success on exit status 0, ProcessFailure on any other status,
        LaunchFailure if the process could not be started.
    """
    logger.debug("Running: %s", shlex.join(cmd))

    try:
        result = subprocess.run(list(cmd), check=False)  # nosec B603
    except OSError as e:
        logger.debug("Could not start %s: %s", cmd[0], e)
        return LaunchFailure(str(e), e)
    except subprocess.SubprocessError as e:
        logger.debug("Could not start %s: %s", cmd[0], e)
        return LaunchFailure(str(e))

    if result.returncode != 0:
        logger.debug("%s exited with status %d", cmd[0], result.returncode)
        return ProcessFailure(result.returncode)

    return Success()


def transcode(
    operation: Operation,
    request: ConversionRequest,
    *,
    ffmpeg: str = DEFAULT_FFMPEG,
    overwrite: bool = False,
) -> Outcome:
    """Run one FFmpeg operation on a request.

    Args:
        operation: Which conversion to perform.
        request: Input and output paths.
        ffmpeg: Executable to invoke.
        overwrite: Pass ``-y`` so FFmpeg replaces an existing output file.

    Returns:
        The classified outcome of the FFmpeg process.

    Raises:
        UnsupportedCodecError: If extracting audio to an unsupported format.
            No process is launched in that case.
    """
    cmd = build_command(operation, request, ffmpeg=ffmpeg, overwrite=overwrite)
    return run_command(cmd)
