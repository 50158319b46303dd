"""Port: persisted user preferences."""

from __future__ import annotations

from typing import Protocol

from whisper_gui.l1_entities.preferences import Preferences


class PreferencesStore(Protocol):
    def load(self) -> Preferences:
        """Read stored preferences, falling back to defaults for anything missing."""
        ...

    def save(self, preferences: Preferences) -> None:
        """Persist both preference keys."""
        ...
