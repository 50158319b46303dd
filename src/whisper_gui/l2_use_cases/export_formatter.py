"""Export formatter — renders a TranscriptionResult as plain text, SRT, WebVTT, or JSON.

Every function here is total: malformed input (out-of-order, negative, or
non-finite times; empty segment lists) degrades to well-formed output instead
of raising.
"""

from __future__ import annotations

import json
import logging
import math
from decimal import Decimal, localcontext

from whisper_gui.l1_entities.output_format import OutputFormat
from whisper_gui.l1_entities.transcript import TranscriptionResult, TranscriptionSegment

log = logging.getLogger('wg.export')

# Cue used when the engine produced text but no segments.
_PLACEHOLDER_START = 0.0
_PLACEHOLDER_END = 10.0


def _timestamp_parts(seconds: float) -> tuple[int, int, int, int]:
    """Split *seconds* into (hours, minutes, seconds, milliseconds).

    Uses truncating remainders so negative values pass through the same
    arithmetic. Decimal on the shortest repr keeps 3661.234 at 234 ms instead
    of drifting to 233 through binary rounding. Precision grows with the
    magnitude so the remainders stay exact for very large values.
    """
    if not math.isfinite(seconds):
        return 0, 0, 0, 0
    t = Decimal(str(seconds))
    with localcontext(prec=max(28, t.adjusted() + 10)):
        hours = int(t / 3600)
        minutes = int((t % 3600) / 60)
        secs = int(t % 60)
        millis = int((t % 1) * 1000)
    return hours, minutes, secs, millis


def format_srt_timestamp(seconds: float) -> str:
    """HH:MM:SS,mmm"""
    h, m, s, ms = _timestamp_parts(seconds)
    return f'{h:02d}:{m:02d}:{s:02d},{ms:03d}'


def format_vtt_timestamp(seconds: float) -> str:
    """HH:MM:SS.mmm"""
    h, m, s, ms = _timestamp_parts(seconds)
    return f'{h:02d}:{m:02d}:{s:02d}.{ms:03d}'


def to_plain_text(result: TranscriptionResult) -> str:
    return result.full_text


def to_srt(result: TranscriptionResult) -> str:
    if not result.segments:
        start = format_srt_timestamp(_PLACEHOLDER_START)
        end = format_srt_timestamp(_PLACEHOLDER_END)
        return f'1\n{start} --> {end}\n{result.full_text}'

    cues = [
        f'{index}\n{format_srt_timestamp(seg.start)} --> {format_srt_timestamp(seg.end)}\n{seg.text}\n'
        for index, seg in enumerate(result.segments, start=1)
    ]
    return '\n'.join(cues)


def to_vtt(result: TranscriptionResult) -> str:
    header = 'WEBVTT\n\n'
    if not result.segments:
        start = format_vtt_timestamp(_PLACEHOLDER_START)
        end = format_vtt_timestamp(_PLACEHOLDER_END)
        return f'{header}{start} --> {end}\n{result.full_text}'

    cues = [
        f'{format_vtt_timestamp(seg.start)} --> {format_vtt_timestamp(seg.end)}\n{seg.text}\n'
        for seg in result.segments
    ]
    return header + '\n'.join(cues)


def _segment_dict(seg: TranscriptionSegment) -> dict:
    return {'start': seg.start, 'end': seg.end, 'text': seg.text}


def to_json(result: TranscriptionResult) -> str:
    payload = {
        'text': result.full_text,
        'segments': [_segment_dict(seg) for seg in result.segments],
    }
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        log.warning('JSON export fell back to text-only envelope: %s', exc)
        return json.dumps({'text': result.full_text}, ensure_ascii=False)


_RENDERERS = {
    OutputFormat.TEXT: to_plain_text,
    OutputFormat.SRT: to_srt,
    OutputFormat.VTT: to_vtt,
    OutputFormat.JSON: to_json,
}


def format_transcript(result: TranscriptionResult, fmt: OutputFormat) -> str:
    """Render *result* in *fmt*."""
    return _RENDERERS[fmt](result)


def suggested_export_name(file_name: str, fmt: OutputFormat) -> str:
    """Default save-as name, e.g. ``talk.mp3_transcription.srt``."""
    return f'{file_name}_transcription.{fmt.file_extension}'
