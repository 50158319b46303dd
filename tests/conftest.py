"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from whisper_gui.l1_entities.config import AppConfig
from whisper_gui.l1_entities.errors import AudioLoadError, ExportError, TranscriptionFailedError
from whisper_gui.l1_entities.preferences import Preferences
from whisper_gui.l1_entities.transcript import EngineChunk, TranscriptionSegment
from whisper_gui.l2_use_cases.playback_tracker import PlaybackTracker
from whisper_gui.l3_interface_adapters.controllers.session_controller import SessionController
from whisper_gui.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTranscriber:
    """Fake transcriber for L2/L3 tests."""

    def __init__(self, chunks: list[EngineChunk] | None = None, models: list[str] | None = None):
        self._chunks = chunks or []
        self._models = models or ['openai_whisper-tiny', 'openai_whisper-base', 'openai_whisper-small']
        self.load_model_calls: list[str] = []
        self.transcribe_calls: list[Path] = []
        self.close_calls = 0
        self.load_error: Exception | None = None
        self.transcribe_error: Exception | None = None

    def load_model(self, model_id: str) -> None:
        self.load_model_calls.append(model_id)
        if self.load_error is not None:
            raise self.load_error

    def transcribe(self, audio_path: Path) -> list[EngineChunk]:
        self.transcribe_calls.append(audio_path)
        if self.transcribe_error is not None:
            raise self.transcribe_error
        return self._chunks

    def recommended_models(self) -> list[str]:
        return list(self._models)

    def close(self) -> None:
        self.close_calls += 1

    def set_chunks(self, chunks: list[EngineChunk]) -> None:
        self._chunks = chunks

    def fail_with(self, message: str) -> None:
        self.transcribe_error = TranscriptionFailedError(message)


class FakeAudioPlayer:
    """Fake transport — position only moves when a test moves it."""

    def __init__(self, duration: float = 120.0) -> None:
        self._duration = duration
        self.current_time = 0.0
        self.is_playing = False
        self.calls: list[str] = []

    @property
    def duration(self) -> float:
        return self._duration

    def play(self) -> None:
        self.calls.append('play')
        self.is_playing = True

    def pause(self) -> None:
        self.calls.append('pause')
        self.is_playing = False

    def stop(self) -> None:
        self.calls.append('stop')
        self.is_playing = False

    def finish(self) -> None:
        """Simulate the media reaching its natural end."""
        self.current_time = self._duration
        self.is_playing = False


class FakeAudioLoader:
    def __init__(self, duration: float = 120.0) -> None:
        self.duration = duration
        self.players: list[FakeAudioPlayer] = []
        self.load_calls: list[Path] = []
        self.fail = False

    def load(self, path: Path) -> FakeAudioPlayer:
        self.load_calls.append(path)
        if self.fail:
            raise AudioLoadError(f'cannot decode {path}')
        player = FakeAudioPlayer(self.duration)
        self.players.append(player)
        return player

    @property
    def last_player(self) -> FakeAudioPlayer:
        return self.players[-1]


class FakePreferencesStore:
    def __init__(self, initial: Preferences | None = None) -> None:
        self.stored = initial or Preferences()
        self.save_calls: list[Preferences] = []

    def load(self) -> Preferences:
        return self.stored

    def save(self, preferences: Preferences) -> None:
        self.save_calls.append(preferences)
        self.stored = preferences


class FakeExporter:
    def __init__(self) -> None:
        self.writes: list[tuple[Path, str]] = []
        self.fail = False

    def write(self, path: Path, content: str) -> Path:
        if self.fail:
            raise ExportError(f'Failed to export transcription to {path}: disk full')
        self.writes.append((path, content))
        return path


async def instant_sleep(_seconds: float) -> None:
    """Zero-delay stand-in for asyncio.sleep that still yields to the loop."""
    await asyncio.sleep(0)


def sample_chunks() -> list[EngineChunk]:
    return [
        EngineChunk(
            text='Hello world.',
            segments=[TranscriptionSegment(start=0.0, end=2.5, text='Hello world.')],
        ),
        EngineChunk(
            text='Second part.',
            segments=[TranscriptionSegment(start=2.5, end=5.0, text='Second part.')],
        ),
    ]


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_transcriber() -> FakeTranscriber:
    return FakeTranscriber(chunks=sample_chunks())


@pytest.fixture
def fake_loader() -> FakeAudioLoader:
    return FakeAudioLoader()


@pytest.fixture
def fake_prefs() -> FakePreferencesStore:
    return FakePreferencesStore()


@pytest.fixture
def fake_exporter() -> FakeExporter:
    return FakeExporter()


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    p = tmp_path / 'talk.mp3'
    p.write_bytes(b'\x00')
    return p


@pytest.fixture
def controller(default_config, fake_transcriber, fake_loader, fake_prefs, fake_exporter) -> SessionController:
    tracker = PlaybackTracker(fake_loader, poll_interval=0.0, sleep=instant_sleep)
    return SessionController(
        config=default_config,
        transcriber=fake_transcriber,
        tracker=tracker,
        preferences_store=fake_prefs,
        exporter=fake_exporter,
        sleep=instant_sleep,
    )
