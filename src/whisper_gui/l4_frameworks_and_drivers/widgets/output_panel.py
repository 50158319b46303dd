"""Output panel — read-only view of the transcript rendered in the selected format."""

from __future__ import annotations

import pyperclip
from textual.binding import Binding
from textual.widgets import TextArea


class OutputPanel(TextArea):
    DEFAULT_CSS = """
    OutputPanel {
        border: solid $primary;
        scrollbar-size: 1 1;
    }
    OutputPanel:focus {
        border: solid $accent;
    }
    """

    BINDINGS = [Binding('c', 'copy_content', 'Copy', show=False)]

    def __init__(self, **kwargs) -> None:
        super().__init__(read_only=True, soft_wrap=True, **kwargs)
        self.border_title = 'Transcription'

    def show_output(self, content: str, format_name: str) -> None:
        self.border_title = f'Transcription — {format_name}'
        if content != self.text:
            self.load_text(content)

    def action_copy_content(self) -> None:
        """Copy the rendered output to the system clipboard."""
        if not self.text:
            self.app.notify('No transcription to copy', severity='warning', timeout=2)
            return
        pyperclip.copy(self.text)
        self.app.notify('Transcription copied', timeout=2)
