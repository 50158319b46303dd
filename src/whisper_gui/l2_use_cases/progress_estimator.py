"""Synthetic progress estimator — a cosmetic cue while the engine runs.

The transcription engine is a single blocking call with no progress
callbacks. This module fakes a plausible progress curve from the audio
duration and a per-model speed factor. It is NOT correlated with the engine's
real progress and never signals completion itself: the displayed fraction is
capped below 1.0, and the owner sets 1.0 (or 0.0) once the real call returns.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from whisper_gui.l1_entities.model_catalog import model_size

log = logging.getLogger('wg.transcribe')

FALLBACK_AUDIO_DURATION = 60.0
DEFAULT_STEPS = 100
DISPLAY_CAP = 0.95

# Seconds of processing per second of audio, by model size.
MODEL_COMPLEXITY: dict[str, float] = {
    'tiny': 0.1,
    'base': 0.2,
    'small': 0.4,
    'medium': 0.8,
    'large': 1.2,
}
DEFAULT_COMPLEXITY = 0.3


def model_complexity(model_id: str) -> float:
    """Speed factor for *model_id* (``openai_whisper-base`` or bare ``base``)."""
    return MODEL_COMPLEXITY.get(model_size(model_id), DEFAULT_COMPLEXITY)


def eased_fraction(linear: float) -> float:
    """Map linear step progress onto a front-loaded, tail-slowed curve."""
    if linear < 0.2:
        return linear * 2.5 * 0.2
    if linear < 0.8:
        return 0.2 + (linear - 0.2) * 0.6
    return 0.8 + (linear - 0.8) * 0.15


def displayed_fraction(linear: float, cap: float = DISPLAY_CAP) -> float:
    return min(eased_fraction(linear), cap)


def estimate_total_seconds(
    audio_duration: float | None,
    model_id: str,
    fallback_duration: float = FALLBACK_AUDIO_DURATION,
) -> float:
    duration = audio_duration if audio_duration and audio_duration > 0 else fallback_duration
    return duration * model_complexity(model_id)


class CancellationToken:
    """Cooperative cancel flag checked by the estimator on every step."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class ProgressEstimator:
    """Emits eased progress fractions over an estimated transcription time."""

    def __init__(
        self,
        audio_duration: float | None,
        model_id: str,
        steps: int = DEFAULT_STEPS,
        cap: float = DISPLAY_CAP,
        fallback_duration: float = FALLBACK_AUDIO_DURATION,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._steps = max(steps, 1)
        self._cap = cap
        self._sleep = sleep
        self.total_seconds = estimate_total_seconds(audio_duration, model_id, fallback_duration)

    @property
    def step_duration(self) -> float:
        return self.total_seconds / self._steps

    def fraction_at(self, step: int) -> float:
        return displayed_fraction(step / self._steps, self._cap)

    async def run(self, on_progress: Callable[[float], None], token: CancellationToken) -> None:
        """Drive *on_progress* until all steps are emitted or *token* is cancelled."""
        log.debug('Estimating %.1fs over %d steps', self.total_seconds, self._steps)
        for step in range(self._steps):
            if token.cancelled:
                return
            on_progress(self.fraction_at(step))
            await self._sleep(self.step_duration)
