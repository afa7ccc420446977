"""Markdown building blocks shared by every formatter."""

from __future__ import annotations

import math
from collections.abc import Sequence

from ..validation import parse_timestamp

PLACEHOLDER = "-"


def escape_markdown(text: str) -> str:
    """Make free text safe for a table cell: escape pipes, flatten line breaks."""
    return text.replace("|", "\\|").replace("\n", " ").replace("\r", "")


def clip(text: str | None, limit: int) -> str:
    """Escaped first *limit* characters of *text*, or the placeholder when absent."""
    if text is None:
        return PLACEHOLDER
    return escape_markdown(text[:limit])


def cell(value: object) -> str:
    """Escaped string form of *value*, or the placeholder when absent."""
    if value is None:
        return PLACEHOLDER
    return escape_markdown(str(value))


def whole_minutes(seconds: float) -> int:
    """Round seconds to the nearest minute, halves rounding up."""
    return math.floor(seconds / 60 + 0.5)


def format_minutes(seconds: float | None) -> str | None:
    """``30m`` style duration; None when the duration is missing or zero."""
    if not seconds:
        return None
    return f"{whole_minutes(seconds)}m"


def format_date(timestamp: str | None) -> str:
    """``YYYY-MM-DD`` in the timestamp's own offset."""
    if not timestamp:
        return PLACEHOLDER
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return escape_markdown(timestamp)
    return parsed.date().isoformat()


def format_datetime(timestamp: str) -> str:
    """``YYYY-MM-DD HH:MM UTC±HH:MM`` in the timestamp's own offset."""
    parsed = parse_timestamp(timestamp)
    if parsed is None:
        return escape_markdown(timestamp)
    return f"{parsed:%Y-%m-%d %H:%M} {parsed.tzname()}"


def yes_no(flag: bool | None) -> str:
    return "Yes" if flag else "No"


def table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    """Pipe-delimited table lines: header, dash separator, one line per row."""
    lines = [f"| {' | '.join(headers)} |", "|" + "---|" * len(headers)]
    lines.extend(f"| {' | '.join(row)} |" for row in rows)
    return lines


def cursor_note(cursor: str | None) -> list[str]:
    """Trailing pagination hint exposing the next-page cursor verbatim."""
    if not cursor:
        return []
    return [f"\n*More results available. Cursor:* `{cursor}`"]


def render_listing(
    label: str,
    total: int,
    *,
    empty_message: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    cursor: str | None = None,
) -> str:
    """Render a counted header followed by a table, or the empty sentence."""
    lines = [f"**{label}** ({total} total)\n"]
    if not rows:
        lines.append(empty_message)
        return "\n".join(lines)
    lines.extend(table(headers, rows))
    lines.extend(cursor_note(cursor))
    return "\n".join(lines)
