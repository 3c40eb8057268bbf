"""Output extension to FFmpeg audio codec mapping."""

from __future__ import annotations

from ffpress.core import UnsupportedCodecError, get_extension

# Codec mapping for audio formats, keyed by lowercased extension
_CODEC_MAP = {
    "mp3": "libmp3lame",
    "aac": "aac",
    "wav": "pcm_s16le",
    "flac": "flac",
    "ogg": "libvorbis",
}

SUPPORTED_AUDIO_EXTENSIONS = frozenset(_CODEC_MAP)


def resolve_audio_codec(filename: str) -> str:
    """Get the audio codec FFmpeg should use for the given output file.

    Args:
        filename: Output filename; only its extension is inspected.

    Returns:
        The FFmpeg audio encoder name.

    Raises:
        UnsupportedCodecError: If the extension is missing or unsupported.
    """
    extension = get_extension(filename)
    codec = _CODEC_MAP.get((extension or "").lower())
    if codec is None:
        raise UnsupportedCodecError(extension)
    return codec
