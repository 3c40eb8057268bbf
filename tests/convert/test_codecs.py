"""Unit tests for the audio codec resolver."""

from __future__ import annotations

import pytest

from ffpress.convert import SUPPORTED_AUDIO_EXTENSIONS, resolve_audio_codec
from ffpress.core import UnsupportedCodecError


class TestResolveAudioCodec:
    """Tests for resolve_audio_codec() function."""

    @pytest.mark.parametrize(
        ("filename", "codec"),
        [
            ("song.mp3", "libmp3lame"),
            ("song.aac", "aac"),
            ("song.wav", "pcm_s16le"),
            ("song.flac", "flac"),
            ("song.ogg", "libvorbis"),
        ],
    )
    def test_supported(self, filename: str, codec: str) -> None:
        """Test each supported extension maps to its codec."""
        assert resolve_audio_codec(filename) == codec

    @pytest.mark.parametrize("filename", ["SONG.MP3", "song.Mp3", "a.FLAC", "b.oGg"])
    def test_case_insensitive(self, filename: str) -> None:
        """Test extension matching ignores case."""
        assert resolve_audio_codec(filename) == resolve_audio_codec(filename.lower())

    def test_path_with_directories(self) -> None:
        """Test only the final component's extension matters."""
        assert resolve_audio_codec("music.d/out.wav") == "pcm_s16le"

    @pytest.mark.parametrize("filename", ["song.opus", "clip.mp4", "song.mp3.bak"])
    def test_unsupported(self, filename: str) -> None:
        """Test unsupported extensions raise."""
        with pytest.raises(UnsupportedCodecError) as exc_info:
            resolve_audio_codec(filename)
        assert exc_info.value.extension == filename.rsplit(".", 1)[1]

    @pytest.mark.parametrize("filename", ["noext", "file.", ".mp3"])
    def test_missing_or_empty_extension(self, filename: str) -> None:
        """Test files without a usable extension raise."""
        with pytest.raises(UnsupportedCodecError):
            resolve_audio_codec(filename)

    def test_supported_set(self) -> None:
        """Test the exposed set of supported extensions."""
        assert {"mp3", "aac", "wav", "flac", "ogg"} == SUPPORTED_AUDIO_EXTENSIONS
