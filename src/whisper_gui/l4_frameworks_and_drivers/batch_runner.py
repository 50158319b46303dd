"""Batch runner — headless transcribe-and-export without the TUI."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from whisper_gui.l1_entities.app_state import AppState
from whisper_gui.l1_entities.playback import format_clock
from whisper_gui.l3_interface_adapters.controllers.session_controller import SessionController


def _err(msg: str, is_error: bool = False) -> None:
    print(f'Error: {msg}' if is_error else msg, file=sys.stderr, flush=True)


class _ProgressPrinter:
    """Prints the estimate each time it crosses a new ten-percent mark."""

    def __init__(self) -> None:
        self._last = -1

    def __call__(self, state: AppState) -> None:
        if not state.is_transcribing:
            return
        percent = state.progress.percent
        if percent // 10 > self._last // 10:
            _err(f'  Transcribing… ~{percent}% (estimated)')
        self._last = percent


async def _run(controller: SessionController, media_path: Path, export_path: Path) -> int:
    if not controller.select_file(media_path):
        _err(f'unsupported media file: {media_path}', is_error=True)
        return 1

    duration = controller.tracker.state.duration
    if duration > 0:
        _err(f'Duration: {format_clock(duration)}')

    model_id = controller.state.preferences.selected_model
    _err(f'Whisper model: {model_id}')
    if not await controller.initialize_model():
        return 1

    controller.on_state_change = _ProgressPrinter()
    succeeded = await controller.transcribe()
    controller.on_state_change = None
    if not succeeded:
        return 1

    result = controller.state.result
    _err(f'Transcribed {len(result.segments)} segments')
    if not controller.export(export_path):
        return 1
    return 0


def run_batch(controller: SessionController, media_path: Path, export_path: Path) -> int:
    """Transcribe *media_path* and write the selected format to *export_path*. Returns an exit code."""
    controller.on_log = _err
    try:
        return asyncio.run(_run(controller, media_path, export_path))
    finally:
        controller.shutdown()
