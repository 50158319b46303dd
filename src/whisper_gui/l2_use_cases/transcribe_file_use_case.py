"""Use case: transcribe one media file while animating estimated progress."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from whisper_gui.l1_entities.transcript import TranscriptionResult
from whisper_gui.l2_use_cases.ports.transcriber import Transcriber
from whisper_gui.l2_use_cases.progress_estimator import (
    DEFAULT_STEPS,
    DISPLAY_CAP,
    FALLBACK_AUDIO_DURATION,
    CancellationToken,
    ProgressEstimator,
)

log = logging.getLogger('wg.transcribe')


@dataclass
class TranscriptionOutcome:
    result: TranscriptionResult
    succeeded: bool
    error: str = ''


class TranscribeFileUseCase:
    """Runs the blocking engine call off-thread with the estimator alongside.

    The estimator is cancelled and awaited before ``execute`` returns, so the
    caller's final progress write can never be overtaken by a stale estimate.
    """

    def __init__(
        self,
        transcriber: Transcriber,
        steps: int = DEFAULT_STEPS,
        cap: float = DISPLAY_CAP,
        fallback_duration: float = FALLBACK_AUDIO_DURATION,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._transcriber = transcriber
        self._steps = steps
        self._cap = cap
        self._fallback_duration = fallback_duration
        self._sleep = sleep

    async def execute(
        self,
        audio_path: Path,
        model_id: str,
        audio_duration: float | None,
        on_progress: Callable[[float], None],
    ) -> TranscriptionOutcome:
        estimator = ProgressEstimator(
            audio_duration,
            model_id,
            steps=self._steps,
            cap=self._cap,
            fallback_duration=self._fallback_duration,
            sleep=self._sleep,
        )
        token = CancellationToken()
        progress_task = asyncio.create_task(estimator.run(on_progress, token))

        try:
            chunks = await asyncio.to_thread(self._transcriber.transcribe, audio_path)
        except Exception as exc:
            log.error('Transcription failed for %s: %s', audio_path, exc, exc_info=True)
            return TranscriptionOutcome(
                result=TranscriptionResult.failed(str(exc)),
                succeeded=False,
                error=str(exc),
            )
        finally:
            token.cancel()
            progress_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await progress_task

        result = TranscriptionResult.from_chunks(chunks)
        log.info('Transcribed %s: %d segments', audio_path.name, len(result.segments))
        return TranscriptionOutcome(result=result, succeeded=True)
