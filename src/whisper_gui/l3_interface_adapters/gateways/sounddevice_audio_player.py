"""Gateway: sounddevice playback — implements AudioLoader / AudioPlayer ports."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import sounddevice as sd

from whisper_gui.l3_interface_adapters.gateways.audio_file_decoder import decode_audio_file

log = logging.getLogger('wg.playback')

PLAYBACK_SAMPLE_RATE = 44100


class SounddeviceAudioPlayer:
    """Plays a decoded PCM buffer through sd.OutputStream from a movable cursor."""

    def __init__(self, samples: np.ndarray, sample_rate: int = PLAYBACK_SAMPLE_RATE) -> None:
        self._samples = samples.astype(np.float32, copy=False)
        self._sample_rate = sample_rate
        self._cursor = 0
        self._stream: sd.OutputStream | None = None
        self._playing = False

    @property
    def duration(self) -> float:
        return len(self._samples) / self._sample_rate

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def current_time(self) -> float:
        return self._cursor / self._sample_rate

    @current_time.setter
    def current_time(self, seconds: float) -> None:
        frame = int(seconds * self._sample_rate)
        self._cursor = min(max(frame, 0), len(self._samples))

    def _callback(self, outdata, frames, time_info, status):
        chunk = self._samples[self._cursor : self._cursor + frames]
        n = len(chunk)
        outdata[:n, 0] = chunk
        outdata[n:] = 0
        self._cursor += n
        if n < frames:
            raise sd.CallbackStop

    def _on_finished(self) -> None:
        self._playing = False

    def play(self) -> None:
        if self._playing:
            return
        # a stream that ran to the end is still open
        if self._stream is not None:
            self._close_stream()
        if self._cursor >= len(self._samples):
            self._cursor = 0
        self._stream = sd.OutputStream(
            samplerate=self._sample_rate,
            channels=1,
            dtype='float32',
            callback=self._callback,
            finished_callback=self._on_finished,
        )
        self._playing = True
        self._stream.start()

    def pause(self) -> None:
        self._close_stream()

    def stop(self) -> None:
        self._close_stream()

    def _close_stream(self) -> None:
        self._playing = False
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None


class SounddeviceAudioLoader:
    """Decodes media with ffmpeg and wraps it in a SounddeviceAudioPlayer."""

    def __init__(self, sample_rate: int = PLAYBACK_SAMPLE_RATE) -> None:
        self._sample_rate = sample_rate

    def load(self, path: Path) -> SounddeviceAudioPlayer:
        samples = decode_audio_file(path, self._sample_rate)
        log.debug('Decoded %s: %d samples @ %d Hz', path.name, len(samples), self._sample_rate)
        return SounddeviceAudioPlayer(samples, self._sample_rate)
