"""Transcript entities — segments, engine chunks, and the flattened result."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NO_RESULT_TEXT = 'No transcription result'


class TranscriptionSegment(BaseModel):
    """A single time-stamped span of recognized speech."""

    model_config = ConfigDict(frozen=True)

    start: float = Field(description='Offset in seconds from media start')
    end: float = Field(description='Offset in seconds from media start')
    text: str


class EngineChunk(BaseModel):
    """One underlying engine result — the engine may split a file into several."""

    model_config = ConfigDict(frozen=True)

    text: str
    segments: list[TranscriptionSegment] = Field(default_factory=list)


class TranscriptionResult(BaseModel):
    """Flattened transcription: full text plus segments in engine emission order.

    Segments are never re-sorted or validated here.
    """

    model_config = ConfigDict(frozen=True)

    full_text: str = ''
    segments: tuple[TranscriptionSegment, ...] = ()

    @classmethod
    def from_chunks(cls, chunks: list[EngineChunk]) -> TranscriptionResult:
        if not chunks:
            return cls(full_text=NO_RESULT_TEXT)
        return cls(
            full_text=' '.join(chunk.text for chunk in chunks),
            segments=tuple(seg for chunk in chunks for seg in chunk.segments),
        )

    @classmethod
    def failed(cls, message: str) -> TranscriptionResult:
        return cls(full_text=f'Transcription failed: {message}')

    @classmethod
    def empty(cls) -> TranscriptionResult:
        return cls()
