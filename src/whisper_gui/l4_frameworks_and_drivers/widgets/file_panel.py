"""File panel — shows the selected media file or a drop hint."""

from __future__ import annotations

from pathlib import Path

from textual.widgets import Static

from whisper_gui.l1_entities.media import is_video

DROP_HINT = 'Drop an audio or video file here, or press o to open one'


class FilePanel(Static):
    DEFAULT_CSS = """
    FilePanel {
        height: 3;
        border: round $primary;
        padding: 0 1;
        content-align: center middle;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(DROP_HINT, **kwargs)
        self.border_title = 'Media'
        self.media_path: Path | None = None

    def show_file(self, path: Path | None) -> None:
        self.media_path = path
        if path is None:
            self.update(DROP_HINT)
            return
        icon = '🎬' if is_video(path) else '♪'
        self.update(f'{icon} {path.name}')
