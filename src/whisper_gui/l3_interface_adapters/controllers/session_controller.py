"""SessionController — owns AppState, orchestrates use cases, notifies observers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from whisper_gui.l1_entities.app_state import AppState
from whisper_gui.l1_entities.config import AppConfig
from whisper_gui.l1_entities.errors import ExportError
from whisper_gui.l1_entities.media import is_supported_media
from whisper_gui.l1_entities.output_format import OutputFormat
from whisper_gui.l1_entities.progress import ProgressState
from whisper_gui.l1_entities.transcript import TranscriptionResult
from whisper_gui.l2_use_cases.export_formatter import format_transcript, suggested_export_name
from whisper_gui.l2_use_cases.playback_tracker import PlaybackTracker
from whisper_gui.l2_use_cases.ports.exporter import TranscriptExporter
from whisper_gui.l2_use_cases.ports.preferences_store import PreferencesStore
from whisper_gui.l2_use_cases.ports.transcriber import Transcriber
from whisper_gui.l2_use_cases.transcribe_file_use_case import TranscribeFileUseCase

log = logging.getLogger('wg.controller')


class SessionController:
    """Central orchestrator bridging use cases to the TUI.

    Owns AppState and replaces it wholesale on every transition, so observers
    never see a half-applied change. The App (L4) delegates all business
    decisions here and renders whatever ``on_state_change`` delivers.
    """

    def __init__(
        self,
        config: AppConfig,
        transcriber: Transcriber,
        tracker: PlaybackTracker,
        preferences_store: PreferencesStore,
        exporter: TranscriptExporter,
        on_state_change: Callable[[AppState], None] | None = None,
        on_log: Callable[[str, bool], None] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._config = config
        self._transcriber = transcriber
        self._tracker = tracker
        self._preferences_store = preferences_store
        self._exporter = exporter
        self.on_state_change = on_state_change
        self.on_log = on_log

        tc = config.transcription
        self._transcribe_uc = TranscribeFileUseCase(
            transcriber,
            steps=tc.progress_steps,
            cap=tc.progress_cap,
            fallback_duration=tc.fallback_audio_duration,
            sleep=sleep,
        )

        self.state = AppState(preferences=preferences_store.load())

    @property
    def tracker(self) -> PlaybackTracker:
        return self._tracker

    def _apply(self, **changes) -> None:
        self.state = self.state.model_copy(update=changes)
        if self.on_state_change is not None:
            self.on_state_change(self.state)

    def _report(self, message: str, *, is_error: bool = False) -> None:
        if self.on_log is not None:
            self.on_log(message, is_error)

    # --- Model ---

    async def initialize_model(self) -> bool:
        """Construct the engine for the selected model. Returns True when ready."""
        if self.state.model_ready or self.state.is_initializing_model:
            return self.state.model_ready

        model_id = self.state.preferences.selected_model
        self._apply(is_initializing_model=True)
        try:
            await asyncio.to_thread(self._transcriber.load_model, model_id)
            models = await asyncio.to_thread(self._transcriber.recommended_models)
        except Exception as exc:
            log.error('Failed to initialize whisper model %s: %s', model_id, exc, exc_info=True)
            self._apply(is_initializing_model=False, model_ready=False)
            self._report(f'Failed to initialize whisper model: {exc}', is_error=True)
            return False

        self._apply(is_initializing_model=False, model_ready=True, available_models=models)
        log.info('Model %s ready (%d models available)', model_id, len(models))
        return True

    async def change_model(self, model_id: str) -> bool:
        if self.state.is_transcribing:
            self._report('Cannot switch models while transcribing')
            return False
        if model_id == self.state.preferences.selected_model and self.state.model_ready:
            return True

        self.set_selected_model(model_id)
        return await self.initialize_model()

    def set_selected_model(self, model_id: str) -> None:
        """Persist *model_id* as the preferred model; the engine must be re-initialized."""
        prefs = self.state.preferences.model_copy(update={'selected_model': model_id})
        self._preferences_store.save(prefs)
        self._apply(preferences=prefs, model_ready=False, available_models=[])

    # --- Output format ---

    def change_output_format(self, fmt: OutputFormat) -> None:
        prefs = self.state.preferences.model_copy(update={'output_format': fmt})
        self._preferences_store.save(prefs)
        self._apply(preferences=prefs)

    def cycle_output_format(self) -> OutputFormat:
        fmt = self.state.preferences.output_format.next()
        self.change_output_format(fmt)
        return fmt

    # --- File selection ---

    def select_file(self, path: Path) -> bool:
        """Select *path* for transcription and playback. Rejects unsupported media."""
        if not is_supported_media(path):
            log.info('Rejected unsupported media: %s', path)
            return False
        if self.state.is_transcribing:
            self._report('Wait for the current transcription to finish')
            return False

        self._apply(
            selected_file=path,
            result=TranscriptionResult.empty(),
            progress=ProgressState(),
        )
        self._tracker.load(path)
        return True

    def clear_selection(self) -> None:
        if self.state.is_transcribing:
            return
        self._tracker.unload()
        self._apply(
            selected_file=None,
            result=TranscriptionResult.empty(),
            progress=ProgressState(),
        )

    # --- Transcription ---

    def _on_estimate(self, fraction: float) -> None:
        if self.state.is_transcribing:
            self._apply(progress=ProgressState(fraction=fraction))

    async def transcribe(self) -> bool:
        """Transcribe the selected file. Returns True on success."""
        if not self.state.can_transcribe:
            return False

        audio_path = self.state.selected_file
        model_id = self.state.preferences.selected_model
        duration = self._tracker.state.duration if self._tracker.has_player else None

        self._apply(
            is_transcribing=True,
            progress=ProgressState(),
            result=TranscriptionResult.empty(),
        )
        try:
            outcome = await self._transcribe_uc.execute(audio_path, model_id, duration, self._on_estimate)
        except asyncio.CancelledError:
            log.info('Transcription of %s cancelled', audio_path.name)
            self._apply(is_transcribing=False, progress=ProgressState(), result=TranscriptionResult.empty())
            raise

        # Estimator is already stopped; finish in a single transition.
        self._apply(
            is_transcribing=False,
            progress=ProgressState(fraction=1.0 if outcome.succeeded else 0.0),
            result=outcome.result,
        )
        if not outcome.succeeded:
            self._report(f'Transcription failed: {outcome.error}', is_error=True)
        return outcome.succeeded

    # --- Export ---

    def formatted_output(self) -> str:
        return format_transcript(self.state.result, self.state.preferences.output_format)

    def suggested_export_name(self) -> str:
        return suggested_export_name(self.state.selected_file_name, self.state.preferences.output_format)

    def default_export_path(self) -> Path:
        return Path(self._config.export.directory) / self.suggested_export_name()

    def export(self, path: Path) -> bool:
        if not self.state.can_export:
            return False
        try:
            self._exporter.write(path, self.formatted_output())
        except ExportError as exc:
            log.error('%s', exc)
            self._report(str(exc), is_error=True)
            return False
        self._report(f'Transcription exported successfully to: {path}')
        return True

    def shutdown(self) -> None:
        self._tracker.close()
        self._transcriber.close()
