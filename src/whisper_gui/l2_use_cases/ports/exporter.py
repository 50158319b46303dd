"""Port: writes a formatted transcript to a user-chosen path."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class TranscriptExporter(Protocol):
    def write(self, path: Path, content: str) -> Path:
        """Write *content* as UTF-8, replacing *path* atomically. Raises ExportError."""
        ...
