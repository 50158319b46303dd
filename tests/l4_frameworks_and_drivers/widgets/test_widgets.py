"""Tests for small widget helpers and renders."""

from __future__ import annotations

from pathlib import Path

import pytest
from textual.app import App, ComposeResult

from whisper_gui.l1_entities.playback import PlaybackStatus
from whisper_gui.l4_frameworks_and_drivers.widgets.file_panel import FilePanel
from whisper_gui.l4_frameworks_and_drivers.widgets.model_modal import ModelModal
from whisper_gui.l4_frameworks_and_drivers.widgets.playback_bar import PlaybackBar, render_gauge
from whisper_gui.l4_frameworks_and_drivers.widgets.status_bar import StatusBar, pad_between


class TestRenderGauge:
    def test_empty_when_no_duration(self):
        assert render_gauge(5.0, 0.0, width=10) == '─' * 10

    def test_half(self):
        assert render_gauge(30.0, 60.0, width=10) == '━' * 5 + '─' * 5

    def test_clamped(self):
        assert render_gauge(90.0, 60.0, width=4) == '━' * 4
        assert render_gauge(-1.0, 60.0, width=4) == '─' * 4


class TestPadBetween:
    def test_right_aligns_hints(self):
        assert pad_between('ab', 'cd', 10) == 'ab      cd'

    def test_escaped_brackets_count_once(self):
        assert pad_between('a', r'\[q] quit', 12) == 'a   ' + r'\[q] quit'

    def test_drops_hints_without_room(self):
        assert pad_between('abcdef', 'hints', 10) == 'abcdef'


class _Host(App):
    def compose(self) -> ComposeResult:
        yield FilePanel(id='file-panel')
        yield PlaybackBar(id='playback-bar')
        yield StatusBar(id='status-bar')


class TestPanels:
    @pytest.mark.asyncio
    async def test_file_panel_tracks_path(self):
        app = _Host()
        async with app.run_test():
            panel = app.query_one(FilePanel)
            assert panel.media_path is None
            panel.show_file(Path('/media/clip.mov'))
            assert panel.media_path == Path('/media/clip.mov')
            panel.show_file(None)
            assert panel.media_path is None

    @pytest.mark.asyncio
    async def test_playback_bar_idle(self):
        app = _Host()
        async with app.run_test():
            assert app.query_one(PlaybackBar).render() == '✗ No audio preview'

    @pytest.mark.asyncio
    async def test_playback_bar_readout(self):
        app = _Host()
        async with app.run_test():
            bar = app.query_one(PlaybackBar)
            bar.status = PlaybackStatus.PLAYING
            bar.current_time = 65.0
            bar.duration = 130.0
            text = bar.render()
            assert text.startswith('▶ 1:05 ')
            assert text.endswith(' 2:10')

    @pytest.mark.asyncio
    async def test_status_bar_segments(self):
        app = _Host()
        async with app.run_test():
            bar = app.query_one(StatusBar)
            bar.action_label = 'Transcribing...'
            bar.busy = True
            bar.model_name = 'Base (74 MB) - Balanced'
            bar.format_name = 'JSON'
            text = bar.render()
            assert text.startswith('⟳ Transcribing... │ Base (74 MB) - Balanced │ JSON')


class _ModalHost(App):
    def __init__(self) -> None:
        super().__init__()
        self.result: str | None = 'unset'

    def on_mount(self) -> None:
        self.push_screen(
            ModelModal(models=['openai_whisper-tiny', 'openai_whisper-base'], current='openai_whisper-base'),
            callback=self._done,
        )

    def _done(self, value: str | None) -> None:
        self.result = value


class TestModelModal:
    @pytest.mark.asyncio
    async def test_enter_picks_highlighted_current(self):
        app = _ModalHost()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press('enter')
            await pilot.pause()
        assert app.result == 'openai_whisper-base'

    @pytest.mark.asyncio
    async def test_escape_cancels(self):
        app = _ModalHost()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press('escape')
            await pilot.pause()
        assert app.result is None
