"""Keyword tracker and workspace tables."""

from __future__ import annotations

from ..models.settings import KeywordTracker, TrackersResponse, WorkspacesResponse
from ._markdown import PLACEHOLDER, cell, clip, escape_markdown, render_listing

MAX_TRACKER_KEYWORDS = 5


def _tracker_row(tracker: KeywordTracker) -> list[str]:
    keywords = tracker.all_keywords()[:MAX_TRACKER_KEYWORDS]
    return [
        clip(tracker.tracker_name, 40),
        cell(tracker.affiliation),
        cell(tracker.said_at),
        escape_markdown(", ".join(keywords)) if keywords else PLACEHOLDER,
    ]


def format_trackers_response(response: TrackersResponse) -> str:
    """Render tracker definitions, showing at most five keywords each."""
    trackers = response.keyword_trackers or []
    return render_listing(
        "Keyword Trackers",
        len(trackers),
        empty_message="No trackers found.",
        headers=("Name", "Affiliation", "Tracks", "Keywords"),
        rows=[_tracker_row(tracker) for tracker in trackers],
    )


def format_workspaces_response(response: WorkspacesResponse) -> str:
    workspaces = response.workspaces or []
    return render_listing(
        "Workspaces",
        len(workspaces),
        empty_message="No workspaces found.",
        headers=("ID", "Name", "Description"),
        rows=[
            [workspace.id, clip(workspace.name, 40), clip(workspace.description, 60)]
            for workspace in workspaces
        ],
    )
