"""WhisperApp — Textual shell: file selection, transcription, playback, and export."""

from __future__ import annotations

import logging
from pathlib import Path

from textual import events
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import ProgressBar, Static

from whisper_gui.l1_entities.app_state import AppState
from whisper_gui.l1_entities.config import AppConfig
from whisper_gui.l1_entities.media import is_supported_media
from whisper_gui.l1_entities.model_catalog import model_display_name
from whisper_gui.l3_interface_adapters.controllers.session_controller import SessionController
from whisper_gui.l4_frameworks_and_drivers.messages import AppStateChanged, LogNotice, PlaybackChanged
from whisper_gui.l4_frameworks_and_drivers.widgets.file_panel import FilePanel
from whisper_gui.l4_frameworks_and_drivers.widgets.model_modal import ModelModal
from whisper_gui.l4_frameworks_and_drivers.widgets.output_panel import OutputPanel
from whisper_gui.l4_frameworks_and_drivers.widgets.path_modal import PathModal
from whisper_gui.l4_frameworks_and_drivers.widgets.playback_bar import PlaybackBar
from whisper_gui.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('wg.app')

HINTS = r'\[o] open  \[t] transcribe  \[space] play  \[f] format  \[e] export  \[m] model  \[c] copy  \[q] quit'


def parse_dropped_path(text: str) -> Path | None:
    """Extract a file path from pasted text.

    Terminals deliver drag-and-drop as a paste: usually the path, sometimes
    quoted or with backslash-escaped spaces, occasionally as a file:// URI.
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not lines:
        return None
    raw = lines[0]
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in '\'"':
        raw = raw[1:-1]
    else:
        raw = raw.replace('\\ ', ' ')
    raw = raw.removeprefix('file://')
    return Path(raw).expanduser() if raw else None


class WhisperApp(TextualApp):
    """Single-window transcription UI. All business decisions go through SessionController."""

    TITLE = 'whisper-gui'
    # Nothing focused by default: the output TextArea would otherwise swallow the seek keys.
    AUTO_FOCUS = None

    CSS = """
    #header {
        height: 1;
        background: $primary;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }
    #progress {
        padding: 0 1;
        height: 1;
    }
    #output-panel {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding('q', 'quit_app', 'Quit', priority=True),
        Binding('o', 'open_file', 'Open'),
        Binding('t', 'transcribe', 'Transcribe'),
        Binding('space', 'toggle_play', 'Play/Pause'),
        Binding('s', 'stop_playback', 'Stop'),
        Binding('left', 'seek_back', 'Back', show=False),
        Binding('right', 'seek_forward', 'Forward', show=False),
        Binding('f', 'cycle_format', 'Format'),
        Binding('e', 'export', 'Export'),
        Binding('m', 'choose_model', 'Model'),
        Binding('c', 'copy_output', 'Copy', show=False),
        Binding('x', 'clear_selection', 'Clear', show=False),
    ]

    def __init__(
        self,
        config: AppConfig,
        controller: SessionController,
        initial_file: Path | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._controller = controller
        self._initial_file = initial_file

        controller.on_state_change = lambda state: self.post_message(AppStateChanged(state))
        controller.on_log = lambda text, is_error: self.post_message(LogNotice(text, is_error=is_error))
        controller.tracker.on_change = lambda state: self.post_message(PlaybackChanged(state))

    def compose(self) -> ComposeResult:
        yield Static('  whisper-gui', id='header')
        yield FilePanel(id='file-panel')
        yield PlaybackBar(id='playback-bar')
        yield ProgressBar(total=100, show_eta=False, id='progress')
        yield OutputPanel(id='output-panel')
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        self.query_one('#status-bar', StatusBar).keybinding_hints = HINTS
        self._render_state(self._controller.state)
        if self._initial_file is not None:
            self._select(self._initial_file)
        self._start_model_init()

    def _start_model_init(self) -> None:  # pragma: no cover -- thin worker launcher; patched out in tests
        self.run_worker(self._controller.initialize_model, group='model', exclusive=True)

    # --- Rendering ---

    def _render_state(self, state: AppState) -> None:
        self.query_one('#file-panel', FilePanel).show_file(state.selected_file)

        progress = self.query_one('#progress', ProgressBar)
        progress.display = state.is_transcribing or state.progress.fraction > 0
        progress.update(progress=state.progress.fraction * 100)

        fmt = state.preferences.output_format
        content = self._controller.formatted_output() if state.result.full_text else ''
        self.query_one('#output-panel', OutputPanel).show_output(content, fmt.display_name)

        bar = self.query_one('#status-bar', StatusBar)
        bar.action_label = state.action_label
        bar.busy = state.is_transcribing or state.is_initializing_model
        bar.model_name = model_display_name(state.preferences.selected_model)
        bar.format_name = fmt.display_name

    # --- Message Handlers ---

    def on_app_state_changed(self, message: AppStateChanged) -> None:
        self._render_state(message.state)

    def on_playback_changed(self, message: PlaybackChanged) -> None:
        bar = self.query_one('#playback-bar', PlaybackBar)
        bar.status = message.state.status
        bar.current_time = message.state.current_time
        bar.duration = message.state.duration

    def on_log_notice(self, message: LogNotice) -> None:
        if message.is_error:
            self.notify(f'{message.text}\n(see wg_debug.log)', severity='error', timeout=10)
        else:
            self.notify(message.text, timeout=5)

    def on_paste(self, event: events.Paste) -> None:
        if isinstance(self.screen, ModalScreen):
            return
        path = parse_dropped_path(event.text)
        if path is not None:
            self._select(path)

    # --- Selection ---

    def _select(self, path: Path) -> None:
        if not is_supported_media(path):
            self.notify(f'Unsupported file type: {path.name}', severity='warning', timeout=5)
            return
        if not path.is_file():
            self.notify(f'File not found: {path}', severity='error', timeout=5)
            return
        if self._controller.select_file(path) and not self._controller.tracker.has_player:
            self.notify('Audio preview unavailable for this file', severity='warning', timeout=5)

    def _on_open_result(self, value: str | None) -> None:
        if value:
            self._select(Path(value).expanduser())

    # --- Actions ---

    def action_open_file(self) -> None:
        self.push_screen(
            PathModal(title='Select Media File', placeholder='/path/to/audio-or-video', must_exist=True),
            callback=self._on_open_result,
        )

    def action_clear_selection(self) -> None:
        self._controller.clear_selection()

    def action_transcribe(self) -> None:
        state = self._controller.state
        if state.is_transcribing:
            return
        if state.selected_file is None:
            self.notify('Select a media file first', timeout=3)
            return
        if not state.can_transcribe:
            self.notify(state.action_label, severity='warning', timeout=3)
            return
        self.run_worker(self._controller.transcribe, group='transcribe', exclusive=True)

    def action_toggle_play(self) -> None:
        if not self._controller.tracker.has_player:
            self.notify('No audio loaded', timeout=2)
            return
        self._controller.tracker.toggle()

    def action_stop_playback(self) -> None:
        self._controller.tracker.stop()

    def action_seek_back(self) -> None:
        self._controller.tracker.seek_by(-self._config.playback.seek_step)

    def action_seek_forward(self) -> None:
        self._controller.tracker.seek_by(self._config.playback.seek_step)

    def action_cycle_format(self) -> None:
        fmt = self._controller.cycle_output_format()
        self.notify(f'Output format: {fmt.display_name}', timeout=2)

    def action_export(self) -> None:
        if not self._controller.state.can_export:
            self.notify('Nothing to export yet', timeout=3)
            return
        fmt = self._controller.state.preferences.output_format
        self.push_screen(
            PathModal(
                title=f'Save transcription as {fmt.display_name} file',
                value=str(self._controller.default_export_path()),
            ),
            callback=self._on_export_result,
        )

    def _on_export_result(self, value: str | None) -> None:
        if value:
            self._controller.export(Path(value).expanduser())

    def action_choose_model(self) -> None:
        state = self._controller.state
        self.push_screen(
            ModelModal(models=state.available_models, current=state.preferences.selected_model),
            callback=self._on_model_result,
        )

    def _on_model_result(self, model_id: str | None) -> None:
        if model_id is None or model_id == self._controller.state.preferences.selected_model:
            return
        log.info('Switching model to %s', model_id)
        self.run_worker(self._controller.change_model(model_id), group='model', exclusive=True)

    def action_copy_output(self) -> None:
        self.query_one('#output-panel', OutputPanel).action_copy_content()

    def action_quit_app(self) -> None:
        self._controller.shutdown()
        self.exit()
