"""Gateway: YAML-backed preferences — implements PreferencesStore port."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from whisper_gui.l1_entities.preferences import Preferences
from whisper_gui.l3_interface_adapters.gateways.paths import PREFERENCES_PATH

log = logging.getLogger('wg.prefs')

MODEL_KEY = 'selected_model'
FORMAT_KEY = 'output_format'


class YamlPreferencesStore:
    """Stores the selected model and output format ids in a small YAML file."""

    def __init__(self, path: Path = PREFERENCES_PATH) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Preferences:
        if not self._path.exists():
            return Preferences()
        try:
            data = yaml.safe_load(self._path.read_text(encoding='utf-8'))
        except (OSError, yaml.YAMLError) as exc:
            log.warning('Ignoring unreadable preferences %s: %s', self._path, exc)
            return Preferences()
        if not isinstance(data, dict):
            return Preferences()

        values = {}
        if MODEL_KEY in data:
            values['selected_model'] = data[MODEL_KEY]
        if FORMAT_KEY in data:
            values['output_format'] = data[FORMAT_KEY]
        return Preferences.model_validate(values)

    def save(self, preferences: Preferences) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            MODEL_KEY: preferences.selected_model,
            FORMAT_KEY: preferences.output_format.value,
        }
        self._path.write_text(yaml.safe_dump(data, sort_keys=True), encoding='utf-8')
        log.debug('Saved preferences to %s', self._path)
