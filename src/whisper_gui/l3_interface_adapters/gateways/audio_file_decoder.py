"""Gateway: media decoder — turns any audio or video file into mono float32 PCM via ffmpeg."""

from __future__ import annotations

import shutil
import subprocess  # noqa: S404 -- fixed argument list, never shell=True
from pathlib import Path

import numpy as np

from whisper_gui.l1_entities.errors import AudioLoadError

DECODE_TIMEOUT = 300  # seconds
FFMPEG_MISSING = 'ffmpeg is required for audio preview.\n  macOS:  brew install ffmpeg\n  Debian: apt install ffmpeg'


def ffmpeg_command(path: Path, sample_rate: int) -> list[str]:
    """Decode the first audio stream (video dropped) to raw little-endian float32 on stdout."""
    return [
        'ffmpeg', '-v', 'error', '-i', str(path),
        '-vn', '-ac', '1', '-ar', str(sample_rate),
        '-f', 'f32le', 'pipe:1',
    ]  # fmt: skip


def decode_audio_file(path: Path, sample_rate: int) -> np.ndarray:
    """Return the audio track of *path* as mono float32 samples at *sample_rate*.

    Raises:
        AudioLoadError: the file or ffmpeg is missing, ffmpeg fails or times
                        out, or no audio samples come back.
    """
    if not path.is_file():
        raise AudioLoadError(f'Media file not found: {path}')
    if shutil.which('ffmpeg') is None:
        raise AudioLoadError(FFMPEG_MISSING)

    try:
        proc = subprocess.run(  # noqa: S603
            ffmpeg_command(path, sample_rate),
            capture_output=True,
            timeout=DECODE_TIMEOUT,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise AudioLoadError(f'Decoding {path.name} took longer than {DECODE_TIMEOUT}s') from exc
    except OSError as exc:
        raise AudioLoadError(f'Could not run ffmpeg: {exc}') from exc

    if proc.returncode != 0:
        detail = proc.stderr.decode('utf-8', errors='replace').strip()
        raise AudioLoadError(f'ffmpeg could not decode {path.name} (exit {proc.returncode}): {detail}')

    # trailing partial sample would make frombuffer raise
    usable = len(proc.stdout) - len(proc.stdout) % 4
    samples = np.frombuffer(proc.stdout[:usable], dtype=np.float32)
    if samples.size == 0:
        raise AudioLoadError(f'No audio track found in {path.name}')
    return samples
