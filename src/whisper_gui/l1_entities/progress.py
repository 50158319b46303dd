"""Progress state entity — the fraction shown while a transcription runs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ProgressState(BaseModel):
    """Displayed progress. 0.0–0.95 while running, 1.0 on completion, 0.0 on failure/reset."""

    model_config = ConfigDict(frozen=True)

    fraction: float = 0.0

    @property
    def percent(self) -> int:
        return int(self.fraction * 100)

    @property
    def is_complete(self) -> bool:
        return self.fraction >= 1.0
