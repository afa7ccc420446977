"""Public call library: folder listings and folder contents."""

from __future__ import annotations

from ..models.library import (
    LibraryFolderCall,
    LibraryFolderCallsResponse,
    LibraryFoldersResponse,
    Snippet,
)
from ._markdown import (
    PLACEHOLDER,
    cell,
    clip,
    escape_markdown,
    format_date,
    render_listing,
    table,
)

MAX_NOTE_LENGTH = 60


def format_library_folders_response(response: LibraryFoldersResponse) -> str:
    folders = response.folders or []
    return render_listing(
        "Library Folders",
        len(folders),
        empty_message="No library folders found.",
        headers=("ID", "Name", "Parent Folder"),
        rows=[
            [folder.id, clip(folder.name, 50), cell(folder.parent_folder_id or "Root")]
            for folder in folders
        ],
    )


def _clock(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def format_snippet(snippet: Snippet | None) -> str:
    """``M:SS–M:SS`` when both bounds are known, placeholder otherwise."""
    if snippet is None or snippet.from_sec is None or snippet.to_sec is None:
        return PLACEHOLDER
    return f"{_clock(snippet.from_sec)}–{_clock(snippet.to_sec)}"


def format_note(note: str | None) -> str:
    """Curator note, cut to 60 characters plus an ellipsis when longer."""
    if not note:
        return PLACEHOLDER
    if len(note) > MAX_NOTE_LENGTH:
        note = note[:MAX_NOTE_LENGTH] + "…"
    return escape_markdown(note)


def _folder_call_row(call: LibraryFolderCall) -> list[str]:
    return [
        call.id,
        clip(call.title, 50),
        cell(call.added_by),
        format_date(call.created),
        format_snippet(call.snippet),
        format_note(call.note),
    ]


def format_library_folder_calls_response(response: LibraryFolderCallsResponse) -> str:
    """Folder heading and summary lines followed by the calls table."""
    calls = response.calls or []
    lines = [f"## Library Folder: {escape_markdown(response.name or 'Unknown Folder')}\n"]
    if response.id:
        lines.append(f"**Folder ID:** {response.id}")
    lines.append(f"**Calls:** {len(calls)}\n")

    if not calls:
        lines.append("No calls in this folder.")
        return "\n".join(lines)

    lines.extend(table(
        ("Call ID", "Title", "Added By", "Added On", "Snippet", "Note"),
        [_folder_call_row(call) for call in calls],
    ))
    return "\n".join(lines)
