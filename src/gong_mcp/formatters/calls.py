"""Call listings, call summaries, and single-call detail views."""

from __future__ import annotations

from ..models.calls import (
    CallDetails,
    CallDetailsResponse,
    CallMetadata,
    CallsResponse,
    SingleCallResponse,
)
from ._markdown import (
    PLACEHOLDER,
    cell,
    clip,
    escape_markdown,
    format_date,
    format_datetime,
    format_minutes,
    render_listing,
    whole_minutes,
    yes_no,
)

CALL_COLUMNS = ("ID", "Title", "Date", "Duration", "Scope")
UNTITLED = "Untitled Call"


def _call_row(call: CallMetadata) -> list[str]:
    return [
        call.id,
        clip(call.title, 50),
        format_date(call.started),
        format_minutes(call.duration) or PLACEHOLDER,
        cell(call.scope),
    ]


def format_calls_response(response: CallsResponse) -> str:
    """Render ``GET /calls`` as a table."""
    return render_listing(
        "Calls",
        response.records.total_records,
        empty_message="No calls found.",
        headers=CALL_COLUMNS,
        rows=[_call_row(call) for call in response.calls or []],
        cursor=response.records.cursor,
    )


def format_call_details_response(response: CallDetailsResponse) -> str:
    """Render search results (``POST /calls/extensive``) with the same columns."""
    return render_listing(
        "Calls",
        response.records.total_records,
        empty_message="No calls found.",
        headers=CALL_COLUMNS,
        rows=[_call_row(call.meta_data) for call in response.calls or []],
        cursor=response.records.cursor,
    )


def format_call_summary(call: CallDetails) -> str:
    """Compact, sectioned summary of one call's AI-generated content."""
    meta = call.meta_data
    content = call.content
    lines = [f"## {escape_markdown(meta.title or UNTITLED)}\n"]

    meta_parts = [f"**ID:** {meta.id}"]
    if meta.started:
        meta_parts.append(f"**Date:** {format_datetime(meta.started)}")
    duration = format_minutes(meta.duration)
    if duration:
        meta_parts.append(f"**Duration:** {duration}")
    if meta.scope:
        meta_parts.append(f"**Scope:** {escape_markdown(meta.scope)}")
    lines.append(" | ".join(meta_parts))
    if meta.url:
        lines.append(f"**URL:** {meta.url}")

    if call.parties:
        lines.append("\n### Participants\n")
        participants = []
        for party in call.parties:
            name = escape_markdown(party.name or party.email_address or "Unknown")
            role = f" ({party.affiliation})" if party.affiliation else ""
            participants.append(f"{name}{role}")
        lines.append(", ".join(participants))

    if content is None:
        return "\n".join(lines)

    if content.brief:
        lines.append("\n### Summary\n")
        lines.append(escape_markdown(content.brief))

    if content.key_points:
        lines.append("\n### Key Points\n")
        lines.extend(f"- {escape_markdown(point.text)}" for point in content.key_points)

    action_items = content.points_of_interest.action_items if content.points_of_interest else None
    if action_items:
        lines.append("\n### Action Items\n")
        lines.extend(
            f"- {escape_markdown(item.snippet)}" for item in action_items if item.snippet
        )

    if content.topics:
        lines.append("\n### Topics\n")
        lines.append(", ".join(
            f"{escape_markdown(topic.name)} ({whole_minutes(topic.duration)}m)"
            for topic in content.topics
        ))

    if content.outline:
        lines.append("\n### Outline\n")
        for section in content.outline:
            duration = format_minutes(section.duration)
            suffix = f" ({duration})" if duration else ""
            lines.append(f"**{escape_markdown(section.section)}**{suffix}")
            lines.extend(
                f"- {escape_markdown(item.text)}" for item in section.items or [] if item.text
            )
            lines.append("")

    return "\n".join(lines)


def format_single_call(response: SingleCallResponse) -> str:
    """Flat ``**Label:** value`` view of ``GET /calls/{id}``."""
    call = response.call
    fields: list[tuple[str, str | None]] = [
        ("ID", call.id),
        ("Date", format_datetime(call.started) if call.started else None),
        ("Scheduled", format_datetime(call.scheduled) if call.scheduled else None),
        ("Duration", format_minutes(call.duration)),
        ("Direction", call.direction),
        ("Scope", call.scope),
        ("System", call.system),
        ("Media", call.media),
        ("Language", call.language),
        ("Purpose", call.purpose),
        ("URL", call.url),
        ("Meeting URL", call.meeting_url),
        ("Host User ID", call.primary_user_id),
        ("Workspace ID", call.workspace_id),
        ("Private", None if call.is_private is None else yes_no(call.is_private)),
    ]
    lines = [f"## {escape_markdown(call.title or UNTITLED)}\n"]
    lines.extend(f"**{label}:** {value}" for label, value in fields if value)
    return "\n".join(lines)
