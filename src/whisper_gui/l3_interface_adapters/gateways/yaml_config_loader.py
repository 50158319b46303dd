"""Gateway: YAML configuration reader — user overrides for AppConfig sections."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from whisper_gui.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS

log = logging.getLogger('wg.config')

KNOWN_SECTIONS = frozenset({'transcription', 'playback', 'export', 'logging'})


def _read_mapping(path: Path) -> dict:
    data = yaml.safe_load(path.read_text(encoding='utf-8'))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    return data


class YamlConfigLoader:
    """Finds the user's config file and returns its contents as an override dict.

    Defaults and validation happen in ``build_app_config``. Unknown top-level
    sections are dropped by validation, so they are logged here to make typos
    visible in the debug log.
    """

    def __init__(self, search_paths: list[Path] | None = None) -> None:
        self._search_paths = search_paths if search_paths is not None else DEFAULT_CONFIG_PATHS

    def find(self, config_path: str | None = None) -> Path | None:
        """Explicit *config_path* must exist; otherwise the first existing search path wins."""
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in self._search_paths if p.exists()), None)

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        path = self.find(config_path)
        data = _read_mapping(path) if path is not None else {}

        unknown = sorted(set(data) - KNOWN_SECTIONS)
        if unknown:
            log.warning('Ignoring unknown config sections in %s: %s', path, ', '.join(unknown))
        if overrides:
            deep_merge(data, overrides)
        return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
