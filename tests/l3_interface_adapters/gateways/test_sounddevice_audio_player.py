"""Tests for SounddeviceAudioPlayer gateway — patches sd.OutputStream."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import numpy as np
import pytest

try:
    import sounddevice as sd
except OSError:  # PortAudio shared library not installed
    pytest.skip('PortAudio is not available', allow_module_level=True)

from whisper_gui.l3_interface_adapters.gateways.sounddevice_audio_player import (
    SounddeviceAudioLoader,
    SounddeviceAudioPlayer,
)

MODULE = 'whisper_gui.l3_interface_adapters.gateways.sounddevice_audio_player'
RATE = 100


def _player(seconds: float = 2.0) -> SounddeviceAudioPlayer:
    return SounddeviceAudioPlayer(np.arange(int(seconds * RATE), dtype=np.float32), RATE)


class TestPosition:
    def test_duration(self):
        assert _player(2.0).duration == 2.0

    def test_seek_sets_cursor(self):
        p = _player()
        p.current_time = 1.25
        assert p.current_time == 1.25

    def test_seek_clamps(self):
        p = _player(2.0)
        p.current_time = -3.0
        assert p.current_time == 0.0
        p.current_time = 99.0
        assert p.current_time == 2.0


@patch(f'{MODULE}.sd.OutputStream')
class TestTransport:
    def test_play_opens_stream(self, mock_stream_cls):
        p = _player()
        p.play()

        kwargs = mock_stream_cls.call_args.kwargs
        assert kwargs['samplerate'] == RATE
        assert kwargs['channels'] == 1
        assert kwargs['dtype'] == 'float32'
        mock_stream_cls.return_value.start.assert_called_once()
        assert p.is_playing

    def test_play_twice_opens_once(self, mock_stream_cls):
        p = _player()
        p.play()
        p.play()
        assert mock_stream_cls.call_count == 1

    def test_pause_closes_stream_and_keeps_position(self, mock_stream_cls):
        p = _player()
        p.current_time = 0.5
        p.play()
        p.pause()
        mock_stream_cls.return_value.close.assert_called_once()
        assert not p.is_playing
        assert p.current_time == 0.5

    def test_play_at_end_rewinds(self, mock_stream_cls):
        p = _player(1.0)
        p.current_time = 1.0
        p.play()
        assert p.current_time == 0.0

    def test_callback_copies_samples_and_advances(self, mock_stream_cls):
        p = _player(1.0)
        p.play()
        callback = mock_stream_cls.call_args.kwargs['callback']

        out = np.zeros((10, 1), dtype=np.float32)
        callback(out, 10, None, None)

        np.testing.assert_array_equal(out[:, 0], np.arange(10, dtype=np.float32))
        assert p.current_time == pytest.approx(0.1)

    def test_callback_stops_at_end(self, mock_stream_cls):
        p = _player(0.05)
        p.play()
        callback = mock_stream_cls.call_args.kwargs['callback']
        finished = mock_stream_cls.call_args.kwargs['finished_callback']

        out = np.ones((10, 1), dtype=np.float32)
        with pytest.raises(sd.CallbackStop):
            callback(out, 10, None, None)
        assert out[5:].sum() == 0

        finished()
        assert not p.is_playing

    def test_replay_after_end_closes_finished_stream(self, mock_stream_cls):
        first, second = MagicMock(), MagicMock()
        mock_stream_cls.side_effect = [first, second]
        p = _player(0.05)
        p.play()
        callback = mock_stream_cls.call_args.kwargs['callback']
        with pytest.raises(sd.CallbackStop):
            callback(np.zeros((10, 1), dtype=np.float32), 10, None, None)
        mock_stream_cls.call_args.kwargs['finished_callback']()

        p.play()
        p.stop()

        first.stop.assert_called_once()
        first.close.assert_called_once()
        second.close.assert_called_once()
        assert p.current_time == 0.0


class TestLoader:
    @patch(f'{MODULE}.decode_audio_file', return_value=np.zeros(300, dtype=np.float32))
    def test_wraps_decoded_samples(self, mock_decode):
        player = SounddeviceAudioLoader(sample_rate=RATE).load(Path('talk.mp3'))
        mock_decode.assert_called_once_with(Path('talk.mp3'), RATE)
        assert player.duration == 3.0
