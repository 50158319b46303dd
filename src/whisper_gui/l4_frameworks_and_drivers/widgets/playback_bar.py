"""Playback bar — transport state glyph, position readout, and a position gauge."""

from __future__ import annotations

from textual.reactive import reactive
from textual.widgets import Static

from whisper_gui.l1_entities.playback import PlaybackStatus, format_clock

_GLYPHS = {
    PlaybackStatus.IDLE: '✗',
    PlaybackStatus.READY: '■',
    PlaybackStatus.PLAYING: '▶',
    PlaybackStatus.PAUSED: '❚❚',
}
_GAUGE_WIDTH = 30


def render_gauge(current: float, duration: float, width: int = _GAUGE_WIDTH) -> str:
    if duration <= 0:
        return '─' * width
    filled = int(min(max(current / duration, 0.0), 1.0) * width)
    return '━' * filled + '─' * (width - filled)


class PlaybackBar(Static):
    DEFAULT_CSS = """
    PlaybackBar {
        height: 1;
        padding: 0 1;
    }
    """

    status: reactive[PlaybackStatus] = reactive(PlaybackStatus.IDLE)
    current_time: reactive[float] = reactive(0.0)
    duration: reactive[float] = reactive(0.0)

    def render(self) -> str:
        if self.status is PlaybackStatus.IDLE:
            return f'{_GLYPHS[self.status]} No audio preview'
        gauge = render_gauge(self.current_time, self.duration)
        return f'{_GLYPHS[self.status]} {format_clock(self.current_time)} {gauge} {format_clock(self.duration)}'
