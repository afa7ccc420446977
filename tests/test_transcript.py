"""Tests for transcript rendering and offset/length windowing."""

from __future__ import annotations

import pytest

from gong_mcp.formatters.transcript import (
    build_speaker_names,
    build_transcript_text,
    format_call_transcript,
    window_text,
)
from gong_mcp.models.calls import CallTranscript, Party

FULL_TEXT = "[Ana]: Hello. How are you?\n\n[Speaker s2]: Fine.\n"


@pytest.fixture()
def transcript() -> CallTranscript:
    return CallTranscript.model_validate(
        {
            "callId": "42",
            "transcript": [
                {
                    "speakerId": "s1",
                    "sentences": [
                        {"start": 0, "end": 900, "text": "Hello."},
                        {"start": 900, "end": 2000, "text": "How are you?"},
                    ],
                },
                {"speakerId": "s2", "sentences": [{"start": 2000, "end": 2500, "text": "Fine."}]},
            ],
        }
    )


@pytest.fixture()
def parties() -> list[Party]:
    return [Party(speaker_id="s1", name="Ana")]


class TestSpeakerNames:
    def test_name_then_email_then_fallback(self):
        names = build_speaker_names(
            [
                Party(speaker_id="a", name="Ana", email_address="ana@example.com"),
                Party(speaker_id="b", email_address="bob@example.com"),
                Party(speaker_id="c"),
                Party(name="No speaker id"),
            ]
        )
        assert names == {"a": "Ana", "b": "bob@example.com", "c": "Speaker c"}

    def test_no_parties(self):
        assert build_speaker_names(None) == {}


class TestTranscriptText:
    def test_monologues_joined(self, transcript, parties):
        assert build_transcript_text(transcript, parties) == FULL_TEXT

    def test_unknown_speakers_get_fallback(self, transcript):
        text = build_transcript_text(transcript)
        assert text.startswith("[Speaker s1]: Hello.")

    def test_speaker_name_escaped(self, transcript):
        text = build_transcript_text(transcript, [Party(speaker_id="s1", name="A|B")])
        assert text.startswith("[A\\|B]: ")


class TestWindowText:
    @pytest.mark.parametrize("max_length", [1, 7, 10, 48, 1000])
    def test_pages_concatenate_to_full_text(self, max_length):
        """GIVEN successive offsets stepping by max_length THEN pages tile the text."""
        pages = []
        offset = 0
        while offset < len(FULL_TEXT):
            window = window_text(FULL_TEXT, offset, max_length)
            pages.append(window.text)
            offset = window.next_offset
        assert "".join(pages) == FULL_TEXT

    def test_counts_code_points(self):
        window = window_text("Olá 😀 mundo", 4, 1)
        assert window.text == "😀"
        assert window.total_length == 11

    def test_past_end_is_empty(self):
        window = window_text(FULL_TEXT, 100, 10)
        assert window.text == ""
        assert window.truncated_start is True
        assert window.truncated_end is False
        assert window.last_char == len(FULL_TEXT)

    def test_rejects_bad_bounds(self):
        with pytest.raises(ValueError):
            window_text(FULL_TEXT, -1, 10)
        with pytest.raises(ValueError):
            window_text(FULL_TEXT, 0, 0)


class TestFormatCallTranscript:
    def test_untruncated(self, transcript, parties):
        assert format_call_transcript(transcript, parties) == (
            f"## Transcript (Call 42)\n\n{FULL_TEXT}"
        )

    def test_first_page(self, transcript, parties):
        assert format_call_transcript(transcript, parties, max_length=10) == (
            "## Transcript (Call 42)\n\n"
            "*Showing characters 1-10 of 48 total*\n\n"
            "[Ana]: Hel\n"
            "\n*[...truncated...]*\n"
            "\n*To see more, use offset: 10*"
        )

    def test_last_page(self, transcript, parties):
        assert format_call_transcript(transcript, parties, max_length=10, offset=40) == (
            "## Transcript (Call 42)\n\n"
            "*Showing characters 41-48 of 48 total*\n\n"
            "*[...truncated start...]*\n\n"
            ": Fine.\n"
        )

    def test_middle_page_has_both_markers(self, transcript, parties):
        text = format_call_transcript(transcript, parties, max_length=10, offset=10)
        assert "*Showing characters 11-20 of 48 total*" in text
        assert "*[...truncated start...]*" in text
        assert "*To see more, use offset: 20*" in text

    def test_offset_past_end(self, transcript, parties):
        text = format_call_transcript(transcript, parties, max_length=10, offset=100)
        assert "*Showing characters 101-48 of 48 total*" in text
        assert "To see more" not in text

    def test_empty_transcript(self):
        empty = CallTranscript.model_validate({"callId": "42", "transcript": []})
        assert format_call_transcript(empty) == (
            "## Transcript (Call 42)\n\n*No transcript available*"
        )
