"""Port: speech-to-text transcription engine."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from whisper_gui.l1_entities.transcript import EngineChunk


class Transcriber(Protocol):
    """Abstract transcription engine. Zero framework types leak through."""

    def load_model(self, model_id: str) -> None:
        """Construct the engine for *model_id*. Raises TranscriptionFailedError if unavailable."""
        ...

    def transcribe(self, audio_path: Path) -> list[EngineChunk]:
        """Transcribe a media file. Blocking; may raise on engine failure."""
        ...

    def recommended_models(self) -> list[str]:
        """Model identifiers supported on this machine."""
        ...

    def close(self) -> None:
        """Release underlying resources."""
        ...
