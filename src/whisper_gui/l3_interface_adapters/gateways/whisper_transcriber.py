"""Gateway: whisper.cpp transcriber — pywhispercpp engine, run inside the worker process."""

from __future__ import annotations

import logging
from pathlib import Path

from pywhispercpp.constants import AVAILABLE_MODELS
from pywhispercpp.model import Model

from whisper_gui.l1_entities.errors import TranscriptionFailedError
from whisper_gui.l1_entities.model_catalog import model_size, recommended_model_ids
from whisper_gui.l1_entities.transcript import EngineChunk, TranscriptionSegment

log = logging.getLogger('wg.transcribe')

# Sizes without a same-named ggml checkpoint.
_GGML_ALIASES = {'large': 'large-v3'}


def ggml_model_name(model_id: str) -> str:
    """``openai_whisper-small`` → ``small``; ``openai_whisper-large`` → ``large-v3``."""
    size = model_size(model_id)
    return _GGML_ALIASES.get(size, size)


def _to_segment(raw) -> TranscriptionSegment | None:
    text = raw.text.strip()
    if not text:
        return None
    # whisper.cpp timestamps are centiseconds
    return TranscriptionSegment(start=raw.t0 / 100.0, end=raw.t1 / 100.0, text=text)


class WhisperTranscriber:
    """Runs whole-file transcription through pywhispercpp.

    whisper.cpp returns one flat segment list per file, which is reported as a
    single engine chunk. It prints to the console from C, so the app only runs
    this class inside SubprocessWhisperTranscriber's child process.
    """

    def __init__(self) -> None:
        self._model: Model | None = None
        self._model_id = ''

    def load_model(self, model_id: str) -> None:
        name = ggml_model_name(model_id)
        try:
            model = Model(name, print_progress=False, print_realtime=False)
        except Exception as exc:
            raise TranscriptionFailedError(f'Could not load whisper model {model_id!r}: {exc}') from exc
        self.close()
        self._model = model
        self._model_id = model_id
        log.info('Loaded whisper model %s (%s)', model_id, name)

    def recommended_models(self) -> list[str]:
        return recommended_model_ids(AVAILABLE_MODELS)

    def transcribe(self, audio_path: Path) -> list[EngineChunk]:
        if self._model is None:
            raise TranscriptionFailedError('Whisper model is not initialized')

        raw_segments = self._model.transcribe(str(audio_path))

        segments = [seg for seg in map(_to_segment, raw_segments) if seg is not None]
        log.debug('%s produced %d segments with %s', audio_path.name, len(segments), self._model_id)
        if not segments:
            return []
        return [EngineChunk(text=' '.join(seg.text for seg in segments), segments=segments)]

    def close(self) -> None:
        self._model = None
