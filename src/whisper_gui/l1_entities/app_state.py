"""Application state entity — everything the UI observes, owned by one controller."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from whisper_gui.l1_entities.preferences import Preferences
from whisper_gui.l1_entities.progress import ProgressState
from whisper_gui.l1_entities.transcript import TranscriptionResult


class AppState(BaseModel):
    """Immutable snapshot; the controller replaces it wholesale on every transition."""

    model_config = ConfigDict(frozen=True)

    selected_file: Path | None = None
    result: TranscriptionResult = Field(default_factory=TranscriptionResult.empty)
    is_transcribing: bool = False
    is_initializing_model: bool = False
    model_ready: bool = False
    available_models: list[str] = Field(default_factory=list)
    progress: ProgressState = Field(default_factory=ProgressState)
    preferences: Preferences = Field(default_factory=Preferences)

    @property
    def selected_file_name(self) -> str:
        return self.selected_file.name if self.selected_file is not None else ''

    @property
    def action_label(self) -> str:
        if self.is_initializing_model:
            return 'Loading AI Model...'
        if self.is_transcribing:
            return 'Transcribing...'
        if not self.model_ready:
            return 'AI Model Not Ready'
        return 'Start Transcription'

    @property
    def can_transcribe(self) -> bool:
        return (
            self.model_ready
            and not self.is_initializing_model
            and not self.is_transcribing
            and self.selected_file is not None
        )

    @property
    def can_export(self) -> bool:
        return bool(self.result.full_text)
