"""Gateway: whisper.cpp in a child process — implements Transcriber port."""

from __future__ import annotations

import contextlib
import logging
import multiprocessing as mp
import os
from multiprocessing.connection import Connection
from pathlib import Path
from typing import Any

from pywhispercpp.constants import AVAILABLE_MODELS

from whisper_gui.l1_entities.errors import TranscriptionFailedError
from whisper_gui.l1_entities.model_catalog import recommended_model_ids
from whisper_gui.l1_entities.transcript import EngineChunk

log = logging.getLogger('wg.transcribe')

# First use of a model downloads its ggml weights.
LOAD_TIMEOUT = 600
JOIN_TIMEOUT = 5


def _silence_own_output() -> None:
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, 1)
    os.dup2(devnull, 2)
    os.close(devnull)


def _worker_main(model_id: str, conn: Any) -> None:
    """Child process: load *model_id*, then answer requests until ``None`` arrives.

    Only this process's fds 1 and 2 are pointed at /dev/null, so whisper.cpp's
    fprintf() output is dropped while the parent keeps drawing to its terminal.
    """
    _silence_own_output()

    try:
        from whisper_gui.l3_interface_adapters.gateways.whisper_transcriber import (  # noqa: PLC0415 -- deferred: whisper.cpp loads in the child only
            WhisperTranscriber,
        )

        transcriber = WhisperTranscriber()
        transcriber.load_model(model_id)
    except Exception as exc:
        conn.send({'status': 'error', 'error': str(exc)})
        conn.close()
        return

    conn.send({'status': 'ready'})

    while True:
        request = conn.recv()
        if request is None:
            break
        try:
            chunks = transcriber.transcribe(Path(request['audio_path']))
        except Exception as exc:
            conn.send({'status': 'error', 'error': str(exc)})
        else:
            conn.send({'status': 'ok', 'chunks': chunks})

    transcriber.close()
    conn.close()


class SubprocessWhisperTranscriber:
    """Transcriber that runs whisper.cpp in a spawned child process.

    The engine holds the GIL for a whole file and writes straight to the C
    stdio streams. In a child process it can do neither to the TUI: the event
    loop keeps animating progress and the terminal fds stay untouched.

    A Pipe is used instead of a Queue so no resource tracker is started; it
    fails when Textual has replaced sys.stderr with a stream lacking a fileno.
    """

    def __init__(self) -> None:
        self._process: Any = None  # SpawnProcess
        self._conn: Connection | None = None

    def load_model(self, model_id: str) -> None:
        self.close()
        ctx = mp.get_context('spawn')
        parent_conn, child_conn = ctx.Pipe(duplex=True)
        self._process = ctx.Process(target=_worker_main, args=(model_id, child_conn), daemon=True)
        self._process.start()
        child_conn.close()
        self._conn = parent_conn

        try:
            reply = self._receive(LOAD_TIMEOUT, 'model load')
        except TranscriptionFailedError:
            self.close()
            raise
        if reply.get('status') != 'ready':
            self.close()
            raise TranscriptionFailedError(reply.get('error', f'Whisper process failed to load {model_id!r}'))
        log.info('Whisper worker process ready with %s', model_id)

    def recommended_models(self) -> list[str]:
        return recommended_model_ids(AVAILABLE_MODELS)

    def transcribe(self, audio_path: Path) -> list[EngineChunk]:
        if self._conn is None:
            raise TranscriptionFailedError('Whisper model is not initialized')
        self._conn.send({'audio_path': str(audio_path)})
        # No timeout: a whole-file run scales with the media length.
        reply = self._receive(None, 'transcription')
        if reply.get('status') == 'error':
            raise TranscriptionFailedError(reply['error'])
        return reply.get('chunks', [])

    def _receive(self, timeout: float | None, stage: str) -> dict:
        try:
            if timeout is not None and not self._conn.poll(timeout=timeout):
                raise TranscriptionFailedError(f'Timed out waiting for whisper {stage}')
            return self._conn.recv()
        except EOFError as exc:
            raise TranscriptionFailedError(f'Whisper process exited unexpectedly during {stage}') from exc

    def close(self) -> None:
        if self._conn is not None:
            # the child may already have exited
            with contextlib.suppress(OSError):
                self._conn.send(None)
            self._conn.close()
            self._conn = None
        if self._process is not None:
            self._process.join(timeout=JOIN_TIMEOUT)
            if self._process.is_alive():
                self._process.terminate()
                self._process.join(timeout=1)
            self._process = None
