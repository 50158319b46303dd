"""Model modal — pick the whisper model used for the next transcription."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import OptionList, Static
from textual.widgets.option_list import Option

from whisper_gui.l1_entities.model_catalog import model_display_name

HINT = 'Smaller models are faster but less accurate. Larger models provide better accuracy but take longer to process.'


class ModelModal(ModalScreen[str | None]):
    """Enter on a model → return its id, Escape → None."""

    DEFAULT_CSS = """
    ModelModal {
        align: center middle;
    }

    ModelModal > Vertical {
        width: 60;
        height: auto;
        max-height: 80%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    ModelModal > Vertical > #model-title {
        text-style: bold;
        margin-bottom: 1;
    }

    ModelModal > Vertical > #model-hint {
        color: $text-muted;
        margin-top: 1;
    }
    """

    AUTO_FOCUS = '*'

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(self, models: list[str], current: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._models = list(models) if current in models else [current, *models]
        self._current = current

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static('Whisper Model', id='model-title')
            yield OptionList(
                *[Option(model_display_name(m), id=m) for m in self._models],
                id='model-list',
            )
            yield Static(HINT, id='model-hint')

    def on_mount(self) -> None:
        self.query_one('#model-list', OptionList).highlighted = self._models.index(self._current)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)
