"""Convert feature - builds and runs FFmpeg commands."""

from ffpress.convert.codecs import SUPPORTED_AUDIO_EXTENSIONS, resolve_audio_codec
from ffpress.convert.outcome import LaunchFailure, Outcome, ProcessFailure, Success
from ffpress.convert.transcoder import (
    COMPRESS_CODEC,
    COMPRESS_CRF,
    COMPRESS_PRESET,
    DEFAULT_FFMPEG,
    Operation,
    build_command,
    run_command,
    transcode,
)

__all__ = [
    "COMPRESS_CODEC",
    "COMPRESS_CRF",
    "COMPRESS_PRESET",
    "DEFAULT_FFMPEG",
    "SUPPORTED_AUDIO_EXTENSIONS",
    "LaunchFailure",
    "Operation",
    "Outcome",
    "ProcessFailure",
    "Success",
    "build_command",
    "resolve_audio_codec",
    "run_command",
    "transcode",
]
