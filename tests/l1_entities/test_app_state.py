"""Tests for AppState derived properties, preferences, and playback helpers."""

from __future__ import annotations

from pathlib import Path

from whisper_gui.l1_entities.app_state import AppState
from whisper_gui.l1_entities.model_catalog import DEFAULT_MODEL
from whisper_gui.l1_entities.output_format import OutputFormat
from whisper_gui.l1_entities.playback import PlaybackState, PlaybackStatus, format_clock
from whisper_gui.l1_entities.preferences import Preferences
from whisper_gui.l1_entities.progress import ProgressState
from whisper_gui.l1_entities.transcript import TranscriptionResult


class TestActionLabel:
    def test_not_ready(self):
        assert AppState().action_label == 'AI Model Not Ready'

    def test_initializing_wins(self):
        state = AppState(is_initializing_model=True, is_transcribing=True)
        assert state.action_label == 'Loading AI Model...'

    def test_transcribing(self):
        assert AppState(model_ready=True, is_transcribing=True).action_label == 'Transcribing...'

    def test_ready(self):
        assert AppState(model_ready=True).action_label == 'Start Transcription'


class TestCanTranscribe:
    def test_requires_file_and_model(self):
        assert not AppState(model_ready=True).can_transcribe
        assert not AppState(selected_file=Path('a.mp3')).can_transcribe
        assert AppState(model_ready=True, selected_file=Path('a.mp3')).can_transcribe

    def test_blocked_while_busy(self):
        busy = AppState(model_ready=True, selected_file=Path('a.mp3'), is_transcribing=True)
        assert not busy.can_transcribe


class TestExportAndNames:
    def test_can_export_follows_text(self):
        assert not AppState().can_export
        assert AppState(result=TranscriptionResult(full_text='x')).can_export

    def test_selected_file_name(self):
        assert AppState().selected_file_name == ''
        assert AppState(selected_file=Path('/tmp/talk.mp3')).selected_file_name == 'talk.mp3'


class TestPreferences:
    def test_defaults(self):
        prefs = Preferences()
        assert prefs.selected_model == DEFAULT_MODEL
        assert prefs.output_format is OutputFormat.TEXT

    def test_format_id_coerced(self):
        assert Preferences.model_validate({'output_format': 'srt'}).output_format is OutputFormat.SRT

    def test_unknown_format_falls_back(self):
        assert Preferences.model_validate({'output_format': 'pdf'}).output_format is OutputFormat.TEXT

    def test_blank_model_falls_back(self):
        assert Preferences.model_validate({'selected_model': '  '}).selected_model == DEFAULT_MODEL

    def test_non_string_model_falls_back(self):
        assert Preferences.model_validate({'selected_model': 42}).selected_model == DEFAULT_MODEL


class TestProgressAndPlayback:
    def test_progress_percent(self):
        assert ProgressState(fraction=0.456).percent == 45
        assert not ProgressState(fraction=0.95).is_complete
        assert ProgressState(fraction=1.0).is_complete

    def test_playback_is_playing(self):
        assert PlaybackState(status=PlaybackStatus.PLAYING).is_playing
        assert not PlaybackState(status=PlaybackStatus.PAUSED).is_playing

    def test_format_clock(self):
        assert format_clock(0) == '0:00'
        assert format_clock(65.9) == '1:05'
        assert format_clock(3600) == '60:00'
