"""Accepted input media — extension rules applied at the selection boundary."""

from __future__ import annotations

from pathlib import Path

AUDIO_EXTENSIONS = frozenset({'mp3', 'wav', 'm4a', 'flac', 'aac', 'ogg'})
VIDEO_EXTENSIONS = frozenset({'mp4', 'mov', 'avi', 'mkv', 'webm'})
SUPPORTED_EXTENSIONS = AUDIO_EXTENSIONS | VIDEO_EXTENSIONS


def _extension(path: Path | str) -> str:
    return Path(path).suffix.lstrip('.').lower()


def is_supported_media(path: Path | str) -> bool:
    return _extension(path) in SUPPORTED_EXTENSIONS


def is_video(path: Path | str) -> bool:
    return _extension(path) in VIDEO_EXTENSIONS
