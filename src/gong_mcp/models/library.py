"""Public call library response contracts."""

from __future__ import annotations

from .common import GongModel


class LibraryFolder(GongModel):
    id: str
    name: str | None = None
    parent_folder_id: str | None = None
    created_by: str | None = None
    updated: str | None = None


class LibraryFoldersResponse(GongModel):
    request_id: str | None = None
    folders: list[LibraryFolder] | None = None


class Snippet(GongModel):
    """Clip boundaries in seconds from call start (inclusive)."""

    from_sec: float | None = None
    to_sec: float | None = None


class LibraryFolderCall(GongModel):
    id: str
    title: str | None = None
    note: str | None = None
    added_by: str | None = None
    created: str | None = None
    url: str | None = None
    snippet: Snippet | None = None


class LibraryFolderCallsResponse(GongModel):
    """``GET /library/folder-content``: the folder itself plus its calls."""

    request_id: str | None = None
    id: str | None = None
    name: str | None = None
    created_by: str | None = None
    updated: str | None = None
    calls: list[LibraryFolderCall] | None = None
