"""whisper-gui — terminal front-end for whisper transcription."""

__version__ = '0.3.0'
