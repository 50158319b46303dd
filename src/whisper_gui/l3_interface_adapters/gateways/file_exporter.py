"""Gateway: atomic UTF-8 file writer — implements TranscriptExporter port."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from whisper_gui.l1_entities.errors import ExportError

log = logging.getLogger('wg.export')


class FileTranscriptExporter:
    """Writes to a sibling temp file, then renames over the destination."""

    def write(self, path: Path, content: str) -> Path:
        directory = path.parent
        tmp_name: str | None = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                'w',
                encoding='utf-8',
                dir=directory,
                prefix=f'.{path.name}.',
                suffix='.tmp',
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(content)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ExportError(f'Failed to export transcription to {path}: {exc}') from exc

        log.info('Transcription exported to %s (%d chars)', path, len(content))
        return path
