"""User tools and the ``gong://users`` resource."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from ..dispatch import render_users_resource
from ..tracing import trace
from ..types import (
    CursorParam,
    FromDateTimeParam,
    IdListParam,
    ToDateTimeParam,
    UserIdParam,
)
from ._runner import READ_ONLY, run_tool

users_server = FastMCP("users")


@users_server.tool(annotations=READ_ONLY)
@trace(name="list_users", span_type="TOOL")
async def list_users(
    cursor: CursorParam = None,
    includeAvatars: Annotated[bool | str | int | None, Field(
        description="Whether to include user avatar URLs in the response",
    )] = None,
) -> str:
    """List all Gong users with name, email, title, and active status."""
    return await run_tool("list_users", cursor=cursor, includeAvatars=includeAvatars)


@users_server.tool(annotations=READ_ONLY)
@trace(name="get_user", span_type="TOOL")
async def get_user(userId: UserIdParam) -> str:
    """Get one user's profile: email, title, phone, manager, spoken languages."""
    return await run_tool("get_user", userId=userId)


@users_server.tool(annotations=READ_ONLY)
@trace(name="search_users", span_type="TOOL")
async def search_users(
    userIds: IdListParam = None,
    createdFromDateTime: FromDateTimeParam = None,
    createdToDateTime: ToDateTimeParam = None,
    cursor: CursorParam = None,
) -> str:
    """Search users by ID list or by account creation date range."""
    return await run_tool(
        "search_users",
        userIds=userIds,
        createdFromDateTime=createdFromDateTime,
        createdToDateTime=createdToDateTime,
        cursor=cursor,
    )


@users_server.resource(
    "gong://users",
    name="Gong Users",
    description="List of all users in your Gong workspace",
    mime_type="text/markdown",
)
async def users_resource() -> str:
    """Users table, pre-rendered as markdown."""
    return await render_users_resource()
