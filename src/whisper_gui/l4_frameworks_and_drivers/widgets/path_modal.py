"""Path modal — text input for choosing a file to open or a path to export to."""

from __future__ import annotations

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static


class PathModal(ModalScreen[str | None]):
    """Prompts for a filesystem path. Enter returns the text, Escape returns None.

    With ``must_exist`` the modal stays open and shows an inline error until
    the entered path names an existing file.
    """

    DEFAULT_CSS = """
    PathModal {
        align: center middle;
    }

    PathModal > Vertical {
        width: 80;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    PathModal #path-title {
        text-style: bold;
        margin-bottom: 1;
    }

    PathModal #path-error {
        color: $error;
        height: auto;
    }

    PathModal #path-hint {
        color: $text-muted;
        margin-top: 1;
        text-align: center;
    }
    """

    AUTO_FOCUS = '*'

    BINDINGS = [('escape', 'cancel', 'Cancel')]

    def __init__(
        self,
        title: str,
        value: str = '',
        placeholder: str = 'Path...',
        must_exist: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._title = title
        self._value = value
        self._placeholder = placeholder
        self._must_exist = must_exist

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self._title, id='path-title')
            yield Input(value=self._value, placeholder=self._placeholder, id='path-input')
            yield Static('', id='path-error')
            yield Static('Enter to confirm · Escape to cancel', id='path-hint')

    def on_input_submitted(self, event: Input.Submitted) -> None:
        text = event.value.strip()
        if not text:
            self.dismiss(None)
            return
        if self._must_exist and not Path(text).expanduser().is_file():
            self.query_one('#path-error', Static).update(f'No such file: {text}')
            return
        self.dismiss(text)

    def action_cancel(self) -> None:
        self.dismiss(None)
