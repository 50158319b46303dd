"""Textual Message subclasses — contracts between the controller/tracker and the App."""

from __future__ import annotations

from textual.message import Message

from whisper_gui.l1_entities.app_state import AppState
from whisper_gui.l1_entities.playback import PlaybackState


class AppStateChanged(Message):
    """Posted by the controller after every state transition."""

    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.state = state


class PlaybackChanged(Message):
    """Posted by the playback tracker on transport changes and poll ticks (~10 Hz while playing)."""

    def __init__(self, state: PlaybackState) -> None:
        super().__init__()
        self.state = state


class LogNotice(Message):
    """User-visible log line (export results, engine failures)."""

    def __init__(self, text: str, is_error: bool = False) -> None:
        super().__init__()
        self.text = text
        self.is_error = is_error
