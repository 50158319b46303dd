"""Playback state entities."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class PlaybackStatus(enum.Enum):
    IDLE = 'idle'
    READY = 'ready'
    PLAYING = 'playing'
    PAUSED = 'paused'


class PlaybackState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: PlaybackStatus = PlaybackStatus.IDLE
    current_time: float = 0.0
    duration: float = 0.0

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING


def format_clock(seconds: float) -> str:
    """Format seconds as m:ss for the playback position readout."""
    total = int(seconds)
    return f'{total // 60}:{total % 60:02d}'
