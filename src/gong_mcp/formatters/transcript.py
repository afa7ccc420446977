"""Speaker-attributed transcript rendering with offset/length windowing.

The full transcript text is built first; its length is the basis for all
window arithmetic. Offsets and lengths count Unicode code points, the same
unit Python uses for ``len`` and slicing, so a window boundary can never
split a character.

Pagination contract: re-requesting with ``offset = offset + max_length``
yields the contiguous continuation, with no gap and no overlap.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..models.calls import CallTranscript, Party
from ..models.requests import DEFAULT_TRANSCRIPT_MAX_LENGTH
from ._markdown import escape_markdown

NO_TRANSCRIPT = "*No transcript available*"


def fallback_speaker_label(speaker_id: str) -> str:
    return f"Speaker {speaker_id}"


def build_speaker_names(parties: Iterable[Party] | None) -> dict[str, str]:
    """Map speaker ids to display names (name, then email, then synthesized)."""
    names: dict[str, str] = {}
    for party in parties or []:
        if party.speaker_id:
            names[party.speaker_id] = (
                party.name or party.email_address or fallback_speaker_label(party.speaker_id)
            )
    return names


def build_transcript_text(
    transcript: CallTranscript,
    parties: Iterable[Party] | None = None,
) -> str:
    """Render every monologue as ``[speaker]: text``, separated by blank lines."""
    names = build_speaker_names(parties)
    lines = []
    for monologue in transcript.transcript:
        speaker = names.get(monologue.speaker_id) or fallback_speaker_label(monologue.speaker_id)
        text = " ".join(sentence.text for sentence in monologue.sentences)
        lines.append(f"[{escape_markdown(speaker)}]: {escape_markdown(text)}\n")
    return "\n".join(lines)


@dataclass(frozen=True)
class TranscriptWindow:
    """One page of a transcript's full text."""

    text: str
    offset: int
    max_length: int
    total_length: int

    @property
    def truncated_start(self) -> bool:
        return self.offset > 0

    @property
    def truncated_end(self) -> bool:
        return self.offset + self.max_length < self.total_length

    @property
    def is_truncated(self) -> bool:
        return self.truncated_start or self.truncated_end

    @property
    def first_char(self) -> int:
        """1-indexed position of the first character shown."""
        return self.offset + 1

    @property
    def last_char(self) -> int:
        """1-indexed, inclusive position of the last character shown."""
        return min(self.offset + self.max_length, self.total_length)

    @property
    def next_offset(self) -> int:
        return self.offset + self.max_length


def window_text(full_text: str, offset: int, max_length: int) -> TranscriptWindow:
    """Cut ``full_text[offset:offset + max_length]``; past-the-end gives ``""``.

    Raises:
        ValueError: If *offset* is negative or *max_length* is not positive.
    """
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")
    if max_length < 1:
        raise ValueError(f"max_length must be >= 1, got {max_length}")
    return TranscriptWindow(
        text=full_text[offset:offset + max_length],
        offset=offset,
        max_length=max_length,
        total_length=len(full_text),
    )


def format_call_transcript(
    transcript: CallTranscript,
    parties: Iterable[Party] | None = None,
    *,
    max_length: int = DEFAULT_TRANSCRIPT_MAX_LENGTH,
    offset: int = 0,
) -> str:
    """Render one window of a call transcript with truncation annotations."""
    lines = [f"## Transcript (Call {transcript.call_id})\n"]
    if not transcript.transcript:
        lines.append(NO_TRANSCRIPT)
        return "\n".join(lines)

    window = window_text(build_transcript_text(transcript, parties), offset, max_length)

    if window.is_truncated:
        lines.append(
            f"*Showing characters {window.first_char}-{window.last_char} "
            f"of {window.total_length} total*\n"
        )
    if window.truncated_start:
        lines.append("*[...truncated start...]*\n")

    lines.append(window.text)

    if window.truncated_end:
        lines.append("\n*[...truncated...]*")
        lines.append(f"\n*To see more, use offset: {window.next_offset}*")

    return "\n".join(lines)
