"""Domain error types."""


class TranscriptionFailedError(Exception):
    """Raised when the engine cannot be constructed or fails to transcribe."""


class AudioLoadError(Exception):
    """Raised when a media file cannot be opened for playback."""


class ExportError(Exception):
    """Raised when a formatted transcript cannot be written to disk."""
