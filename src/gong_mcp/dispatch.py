"""Tool handlers and the dispatch boundary.

Each handler runs one validate → fetch → format pipeline and returns text.
:func:`call_tool` routes a tool name to its handler and converts every
failure into an error :class:`~gong_mcp.errors.ToolResult`, so nothing
raises past it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .client import GongClient, get_client
from .errors import ErrorKind, NotFoundError, ToolResult, categorize_error, make_tool_error
from .formatters import (
    format_call_details_response,
    format_call_summary,
    format_call_transcript,
    format_calls_response,
    format_library_folder_calls_response,
    format_library_folders_response,
    format_single_call,
    format_single_user,
    format_trackers_response,
    format_users_response,
    format_workspaces_response,
)
from .models.requests import (
    CallIdRequest,
    GetCallTranscriptRequest,
    GetLibraryFolderCallsRequest,
    GetTrackersRequest,
    GetUserRequest,
    ListCallsRequest,
    ListLibraryFoldersRequest,
    ListUsersRequest,
    ListWorkspacesRequest,
    SearchCallsRequest,
    SearchUsersRequest,
    parse_request,
)

logger = logging.getLogger(__name__)

Handler = Callable[[GongClient, Any], Awaitable[str]]

# Caller-fixable failures are routine and logged without a traceback.
_EXPECTED_KINDS = {ErrorKind.VALIDATION, ErrorKind.NOT_FOUND}


async def list_calls(client: GongClient, arguments: Any) -> str:
    request = parse_request(ListCallsRequest, arguments)
    return format_calls_response(await client.list_calls(request))


async def search_calls(client: GongClient, arguments: Any) -> str:
    request = parse_request(SearchCallsRequest, arguments)
    return format_call_details_response(await client.search_calls(request))


async def get_call(client: GongClient, arguments: Any) -> str:
    request = parse_request(CallIdRequest, arguments)
    return format_single_call(await client.get_call(request.call_id))


async def get_call_summary(client: GongClient, arguments: Any) -> str:
    request = parse_request(CallIdRequest, arguments)
    result = await client.get_call_details([request.call_id])
    if not result.calls:
        raise NotFoundError(f"Call not found: {request.call_id}")
    return format_call_summary(result.calls[0])


async def get_call_transcript(client: GongClient, arguments: Any) -> str:
    """Fetch transcript and call details concurrently to resolve speaker names."""
    request = parse_request(GetCallTranscriptRequest, arguments)
    transcripts, details = await asyncio.gather(
        client.get_transcripts([request.call_id]),
        client.get_call_details([request.call_id]),
    )
    if not transcripts.call_transcripts:
        raise NotFoundError(f"Transcript not found: {request.call_id}")
    parties = details.calls[0].parties if details.calls else None
    return format_call_transcript(
        transcripts.call_transcripts[0],
        parties,
        max_length=request.max_length,
        offset=request.offset,
    )


async def list_users(client: GongClient, arguments: Any) -> str:
    request = parse_request(ListUsersRequest, arguments)
    return format_users_response(await client.list_users(request))


async def get_user(client: GongClient, arguments: Any) -> str:
    request = parse_request(GetUserRequest, arguments)
    return format_single_user(await client.get_user(request.user_id))


async def search_users(client: GongClient, arguments: Any) -> str:
    request = parse_request(SearchUsersRequest, arguments)
    return format_users_response(await client.search_users(request))


async def get_trackers(client: GongClient, arguments: Any) -> str:
    request = parse_request(GetTrackersRequest, arguments)
    return format_trackers_response(await client.get_trackers(request.workspace_id))


async def list_workspaces(client: GongClient, arguments: Any) -> str:
    parse_request(ListWorkspacesRequest, arguments)
    return format_workspaces_response(await client.list_workspaces())


async def list_library_folders(client: GongClient, arguments: Any) -> str:
    request = parse_request(ListLibraryFoldersRequest, arguments)
    return format_library_folders_response(await client.list_library_folders(request.workspace_id))


async def get_library_folder_calls(client: GongClient, arguments: Any) -> str:
    request = parse_request(GetLibraryFolderCallsRequest, arguments)
    return format_library_folder_calls_response(
        await client.get_library_folder_calls(request.folder_id)
    )


TOOL_HANDLERS: dict[str, Handler] = {
    "list_calls": list_calls,
    "search_calls": search_calls,
    "get_call": get_call,
    "get_call_summary": get_call_summary,
    "get_call_transcript": get_call_transcript,
    "list_users": list_users,
    "get_user": get_user,
    "search_users": search_users,
    "get_trackers": get_trackers,
    "list_workspaces": list_workspaces,
    "list_library_folders": list_library_folders,
    "get_library_folder_calls": get_library_folder_calls,
}


async def call_tool(
    name: str,
    arguments: Any = None,
    *,
    client: GongClient | None = None,
) -> ToolResult:
    """Run the named tool; every failure comes back as an error result."""
    try:
        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            raise LookupError(f"Unknown tool: {name}")
        text = await handler(client or get_client(), arguments)
        return ToolResult(text=text)
    except Exception as exc:
        kind = categorize_error(exc)
        if kind in _EXPECTED_KINDS:
            logger.info("%s rejected (%s): %s", name, kind.value, exc)
        elif kind is ErrorKind.UNKNOWN:
            logger.exception("%s failed unexpectedly", name)
        else:
            logger.warning("%s failed (%s): %s", name, kind.value, exc)
        return make_tool_error(exc)


async def render_users_resource(client: GongClient | None = None) -> str:
    """Text of the ``gong://users`` resource: the first page of users."""
    client = client or get_client()
    return format_users_response(await client.list_users())
