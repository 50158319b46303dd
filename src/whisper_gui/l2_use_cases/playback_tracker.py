"""Playback position tracker — state machine over an external audio transport.

States: IDLE → READY (load) → PLAYING ⇄ PAUSED, and PLAYING/PAUSED → READY (stop).
While PLAYING, a poll task copies the player's position into ``current_time``
every ``poll_interval`` seconds and falls back to PAUSED once the transport
reports it is no longer playing (natural end of media).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from whisper_gui.l1_entities.errors import AudioLoadError
from whisper_gui.l1_entities.playback import PlaybackState, PlaybackStatus
from whisper_gui.l2_use_cases.ports.audio_player import AudioLoader, AudioPlayer

log = logging.getLogger('wg.playback')

POLL_INTERVAL = 0.1


class PlaybackTracker:
    def __init__(
        self,
        loader: AudioLoader,
        poll_interval: float = POLL_INTERVAL,
        on_change: Callable[[PlaybackState], None] | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._loader = loader
        self._poll_interval = poll_interval
        self._sleep = sleep
        self.on_change = on_change

        self._player: AudioPlayer | None = None
        self._state = PlaybackState()
        self._poll_task: asyncio.Task | None = None
        self._generation = 0  # bumped per resource; stale poll ticks compare against it

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def has_player(self) -> bool:
        return self._player is not None

    @property
    def is_polling(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def _set(self, **changes) -> None:
        self._state = self._state.model_copy(update=changes)
        if self.on_change is not None:
            self.on_change(self._state)

    # --- Resource lifecycle ---

    def load(self, path: Path) -> bool:
        """Open *path*, discarding any previous resource and its position."""
        self._release()
        try:
            player = self._loader.load(path)
        except AudioLoadError as exc:
            log.error('Failed to load audio for playback: %s', exc)
            self._set(status=PlaybackStatus.IDLE, current_time=0.0, duration=0.0)
            return False

        self._player = player
        self._set(status=PlaybackStatus.READY, current_time=0.0, duration=player.duration)
        log.debug('Loaded %s (%.2fs)', path.name, player.duration)
        return True

    def unload(self) -> None:
        self._release()
        self._set(status=PlaybackStatus.IDLE, current_time=0.0, duration=0.0)

    def close(self) -> None:
        self._release()

    def _release(self) -> None:
        self._cancel_poll()
        self._generation += 1
        if self._player is not None and self._player.is_playing:
            self._player.stop()
        self._player = None

    # --- Transport ---

    def play(self) -> None:
        if self._player is None or self._state.status not in (PlaybackStatus.READY, PlaybackStatus.PAUSED):
            return
        self._player.play()
        self._set(status=PlaybackStatus.PLAYING)
        self._start_poll()

    def pause(self) -> None:
        if self._player is None or self._state.status is not PlaybackStatus.PLAYING:
            return
        self._player.pause()
        self._cancel_poll()
        self._set(status=PlaybackStatus.PAUSED, current_time=self._player.current_time)

    def stop(self) -> None:
        if self._player is None or self._state.status is PlaybackStatus.IDLE:
            return
        self._player.stop()
        self._player.current_time = 0.0
        self._cancel_poll()
        self._set(status=PlaybackStatus.READY, current_time=0.0)

    def toggle(self) -> None:
        if self._state.is_playing:
            self.pause()
        else:
            self.play()

    def seek(self, seconds: float) -> None:
        """Move the transport to *seconds*. Play/pause state is unchanged."""
        if self._player is None or self._state.status is PlaybackStatus.IDLE:
            return
        self._player.current_time = seconds
        self._set(current_time=seconds)

    def seek_by(self, delta: float) -> None:
        target = min(max(self._state.current_time + delta, 0.0), self._state.duration)
        self.seek(target)

    # --- Polling ---

    def tick(self, generation: int | None = None) -> bool:
        """Sync ``current_time`` from the player. Returns False once polling should stop."""
        if generation is not None and generation != self._generation:
            return False
        if self._player is None or self._state.status is not PlaybackStatus.PLAYING:
            return False

        position = self._player.current_time
        if not self._player.is_playing:
            self._set(status=PlaybackStatus.PAUSED, current_time=position)
            return False
        self._set(current_time=position)
        return True

    def _start_poll(self) -> None:
        self._cancel_poll()
        self._poll_task = asyncio.get_running_loop().create_task(self._poll_loop(self._generation))

    def _cancel_poll(self) -> None:
        if self._poll_task is not None and not self._poll_task.done():
            self._poll_task.cancel()
        self._poll_task = None

    async def _poll_loop(self, generation: int) -> None:
        while True:
            await self._sleep(self._poll_interval)
            if not self.tick(generation):
                return
