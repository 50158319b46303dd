"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class TranscriptionConfig(BaseModel):
    fallback_audio_duration: float
    progress_steps: int
    progress_cap: float


class PlaybackConfig(BaseModel):
    poll_interval: float
    seek_step: float
    sample_rate: int


class ExportConfig(BaseModel):
    directory: str


class LoggingConfig(BaseModel):
    directory: str | None = None  # None → platform user log dir


class AppConfig(BaseModel):
    transcription: TranscriptionConfig
    playback: PlaybackConfig
    export: ExportConfig
    logging: LoggingConfig = LoggingConfig()
