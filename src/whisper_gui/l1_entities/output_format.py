"""L1 entity: transcript export format."""

from __future__ import annotations

import enum


class OutputFormat(enum.Enum):
    TEXT = 'text'
    SRT = 'srt'
    VTT = 'vtt'
    JSON = 'json'

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def file_extension(self) -> str:
        return _EXTENSIONS[self]

    @property
    def mime_type(self) -> str:
        return _MIME_TYPES[self]

    @classmethod
    def from_id(cls, value: str | None) -> OutputFormat:
        """Resolve a persisted format id, falling back to plain text."""
        try:
            return cls(value)
        except ValueError:
            return cls.TEXT

    def next(self) -> OutputFormat:
        members = list(OutputFormat)
        return members[(members.index(self) + 1) % len(members)]


_DISPLAY_NAMES = {
    OutputFormat.TEXT: 'Plain Text',
    OutputFormat.SRT: 'SRT Subtitles',
    OutputFormat.VTT: 'WebVTT Subtitles',
    OutputFormat.JSON: 'JSON',
}

_EXTENSIONS = {
    OutputFormat.TEXT: 'txt',
    OutputFormat.SRT: 'srt',
    OutputFormat.VTT: 'vtt',
    OutputFormat.JSON: 'json',
}

_MIME_TYPES = {
    OutputFormat.TEXT: 'text/plain',
    OutputFormat.SRT: 'application/x-subrip',
    OutputFormat.VTT: 'text/vtt',
    OutputFormat.JSON: 'application/json',
}
