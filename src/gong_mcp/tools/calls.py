"""Call tools: listing, search, metadata, AI summary, and transcript."""

from __future__ import annotations

from fastmcp import FastMCP

from ..tracing import trace
from ..types import (
    CallIdParam,
    CursorParam,
    FromDateTimeParam,
    IdListParam,
    MaxLengthParam,
    OffsetParam,
    OptionalWorkspaceIdParam,
    ToDateTimeParam,
)
from ._runner import READ_ONLY, run_tool

calls_server = FastMCP("calls")


@calls_server.tool(annotations=READ_ONLY)
@trace(name="list_calls", span_type="TOOL")
async def list_calls(
    fromDateTime: FromDateTimeParam = None,
    toDateTime: ToDateTimeParam = None,
    workspaceId: OptionalWorkspaceIdParam = None,
    cursor: CursorParam = None,
) -> str:
    """List Gong calls with optional date filtering.

    Returns minimal call metadata (ID, title, date, duration, scope). Use
    get_call_summary for details or get_call_transcript for the full transcript.
    """
    return await run_tool(
        "list_calls",
        fromDateTime=fromDateTime,
        toDateTime=toDateTime,
        workspaceId=workspaceId,
        cursor=cursor,
    )


@calls_server.tool(annotations=READ_ONLY)
@trace(name="search_calls", span_type="TOOL")
async def search_calls(
    fromDateTime: FromDateTimeParam = None,
    toDateTime: ToDateTimeParam = None,
    workspaceId: OptionalWorkspaceIdParam = None,
    primaryUserIds: IdListParam = None,
    callIds: IdListParam = None,
    cursor: CursorParam = None,
) -> str:
    """Search calls by date range, workspace, host users, or specific call IDs.

    primaryUserIds filters by the users who hosted the calls; callIds limits
    the search to the given calls. Returns the same table as list_calls.
    """
    return await run_tool(
        "search_calls",
        fromDateTime=fromDateTime,
        toDateTime=toDateTime,
        workspaceId=workspaceId,
        primaryUserIds=primaryUserIds,
        callIds=callIds,
        cursor=cursor,
    )


@calls_server.tool(annotations=READ_ONLY)
@trace(name="get_call", span_type="TOOL")
async def get_call(callId: CallIdParam) -> str:
    """Get metadata for a single call (title, date, duration, direction, host, URL)."""
    return await run_tool("get_call", callId=callId)


@calls_server.tool(annotations=READ_ONLY)
@trace(name="get_call_summary", span_type="TOOL")
async def get_call_summary(callId: CallIdParam) -> str:
    """Get an AI-generated summary of a single call.

    Includes brief overview, key points, topics, action items, and a detailed
    outline. This is the recommended way to understand a call; use
    get_call_transcript only when exact quotes are needed.
    """
    return await run_tool("get_call_summary", callId=callId)


@calls_server.tool(annotations=READ_ONLY)
@trace(name="get_call_transcript", span_type="TOOL")
async def get_call_transcript(
    callId: CallIdParam,
    maxLength: MaxLengthParam = 10000,
    offset: OffsetParam = 0,
) -> str:
    """Get the speaker-attributed transcript of a single call.

    Transcripts are truncated to maxLength characters (default 10000). When
    truncated, the response names the offset to request for the next page.
    """
    return await run_tool(
        "get_call_transcript", callId=callId, maxLength=maxLength, offset=offset
    )
