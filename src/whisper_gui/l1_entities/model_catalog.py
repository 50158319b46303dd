"""Whisper model identifiers and their human-readable names."""

from __future__ import annotations

MODEL_PREFIX = 'openai_whisper-'
DEFAULT_MODEL = f'{MODEL_PREFIX}base'

_DISPLAY_NAMES = {
    'tiny': 'Tiny (39 MB) - Fastest',
    'base': 'Base (74 MB) - Balanced',
    'small': 'Small (244 MB) - Good',
    'medium': 'Medium (769 MB) - Better',
    'large': 'Large (1550 MB) - Best',
}


def model_size(model_id: str) -> str:
    """Strip the ``openai_whisper-`` prefix: ``openai_whisper-base`` → ``base``."""
    return model_id.removeprefix(MODEL_PREFIX)


def model_id_for(size: str) -> str:
    return f'{MODEL_PREFIX}{size}'


def model_display_name(model_id: str) -> str:
    if model_id.startswith(MODEL_PREFIX) and model_size(model_id) in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[model_size(model_id)]
    return model_id.replace(MODEL_PREFIX, '').title()


def recommended_model_ids(ggml_names: list[str]) -> list[str]:
    # quantized variants duplicate the plain sizes
    return [model_id_for(name) for name in ggml_names if '-q' not in name]
