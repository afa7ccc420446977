"""Tracker settings and workspace response contracts."""

from __future__ import annotations

from .common import GongModel


class KeywordGroup(GongModel):
    """Keywords a tracker listens for in one language."""

    language: str | None = None
    keywords: list[str] | None = None
    include_related_forms: bool | None = None


class KeywordTracker(GongModel):
    tracker_id: str | None = None
    tracker_name: str | None = None
    workspace_id: str | None = None
    language_keywords: list[KeywordGroup] | None = None
    affiliation: str | None = None
    part_of_question: bool | None = None
    said_at: str | None = None
    filter_query: str | None = None
    created: str | None = None
    creator_user_id: str | None = None

    def all_keywords(self) -> list[str]:
        """Keywords across every language group, in declaration order."""
        return [
            keyword
            for group in self.language_keywords or []
            for keyword in group.keywords or []
        ]


class TrackersResponse(GongModel):
    request_id: str | None = None
    keyword_trackers: list[KeywordTracker] | None = None


class Workspace(GongModel):
    id: str
    name: str | None = None
    description: str | None = None


class WorkspacesResponse(GongModel):
    request_id: str | None = None
    workspaces: list[Workspace] | None = None
