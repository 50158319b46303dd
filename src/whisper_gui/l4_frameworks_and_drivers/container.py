"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from whisper_gui.l1_entities.config import AppConfig
from whisper_gui.l2_use_cases.playback_tracker import PlaybackTracker
from whisper_gui.l2_use_cases.ports.audio_player import AudioLoader
from whisper_gui.l2_use_cases.ports.exporter import TranscriptExporter
from whisper_gui.l2_use_cases.ports.preferences_store import PreferencesStore
from whisper_gui.l2_use_cases.ports.transcriber import Transcriber
from whisper_gui.l3_interface_adapters.controllers.session_controller import SessionController
from whisper_gui.l3_interface_adapters.gateways.file_exporter import FileTranscriptExporter
from whisper_gui.l3_interface_adapters.gateways.subprocess_whisper_transcriber import SubprocessWhisperTranscriber
from whisper_gui.l3_interface_adapters.gateways.yaml_preferences_store import YamlPreferencesStore


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        preferences_store: PreferencesStore | None = None,
        transcriber: Transcriber | None = None,
        audio_loader: AudioLoader | None = None,
        exporter: TranscriptExporter | None = None,
    ) -> None:
        self.config = config

        self.preferences_store: PreferencesStore = preferences_store or YamlPreferencesStore()
        self.transcriber: Transcriber = transcriber or SubprocessWhisperTranscriber()
        self.audio_loader: AudioLoader = audio_loader or self._build_audio_loader(config.playback.sample_rate)
        self.exporter: TranscriptExporter = exporter or FileTranscriptExporter()

        self.tracker = PlaybackTracker(self.audio_loader, poll_interval=config.playback.poll_interval)
        self.controller = SessionController(
            config=config,
            transcriber=self.transcriber,
            tracker=self.tracker,
            preferences_store=self.preferences_store,
            exporter=self.exporter,
        )

    @staticmethod
    def _build_audio_loader(sample_rate: int) -> AudioLoader:
        from whisper_gui.l3_interface_adapters.gateways.sounddevice_audio_player import (  # noqa: PLC0415 -- deferred: importing sounddevice loads PortAudio
            SounddeviceAudioLoader,
        )

        return SounddeviceAudioLoader(sample_rate)
