"""Port: audio transport — opening media and controlling playback."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class AudioPlayer(Protocol):
    """A loaded media resource with play/pause/stop transport."""

    current_time: float

    @property
    def duration(self) -> float: ...

    @property
    def is_playing(self) -> bool: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def stop(self) -> None: ...


class AudioLoader(Protocol):
    def load(self, path: Path) -> AudioPlayer:
        """Open *path* for playback. Raises AudioLoadError on unreadable/unsupported files."""
        ...
