"""User preferences — the two settings persisted across runs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from whisper_gui.l1_entities.model_catalog import DEFAULT_MODEL
from whisper_gui.l1_entities.output_format import OutputFormat


class Preferences(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_model: str = DEFAULT_MODEL
    output_format: OutputFormat = OutputFormat.TEXT

    @field_validator('output_format', mode='before')
    @classmethod
    def _coerce_format(cls, value: object) -> OutputFormat:
        if isinstance(value, OutputFormat):
            return value
        return OutputFormat.from_id(value if isinstance(value, str) else None)

    @field_validator('selected_model', mode='before')
    @classmethod
    def _coerce_model(cls, value: object) -> str:
        if isinstance(value, str) and value.strip():
            return value.strip()
        return DEFAULT_MODEL
