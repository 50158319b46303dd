"""Status bar — bottom bar showing model, output format, action state, and keybinding hints."""

from __future__ import annotations

from rich.cells import cell_len
from textual.reactive import reactive
from textual.widgets import Static


class StatusBar(Static):
    """Bottom status bar with model/format summary and keybinding hints."""

    DEFAULT_CSS = """
    StatusBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text;
        padding: 0 1;
        overflow: hidden hidden;
    }
    """

    model_name: reactive[str] = reactive('')
    format_name: reactive[str] = reactive('')
    action_label: reactive[str] = reactive('')
    busy: reactive[bool] = reactive(False)
    keybinding_hints: reactive[str] = reactive('')

    def render(self) -> str:
        icon = '⟳' if self.busy else '○'
        segments = [f'{icon} {self.action_label}'] if self.action_label else []
        segments += [part for part in (self.model_name, self.format_name) if part]
        return pad_between(' │ '.join(segments), self.keybinding_hints, (self.size.width or 80) - 2)


def pad_between(left: str, right: str, width: int) -> str:
    """Right-align *right* after *left* within *width* cells; drop it when there is no room."""
    if not right:
        return left
    spare = width - cell_len(left) - cell_len(right.replace(r'\[', '['))
    return f'{left}{" " * spare}{right}' if spare >= 2 else left
