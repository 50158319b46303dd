"""Application config defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from whisper_gui.l1_entities.config import AppConfig
from whisper_gui.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'transcription': {
        'fallback_audio_duration': 60.0,
        'progress_steps': 100,
        'progress_cap': 0.95,
    },
    'playback': {
        'poll_interval': 0.1,
        'seek_step': 5.0,
        'sample_rate': 44100,
    },
    'export': {
        'directory': '.',
    },
    'logging': {
        'directory': None,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
