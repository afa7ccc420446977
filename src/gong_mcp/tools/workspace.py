"""Workspace-level tools: trackers, workspaces, and the public call library."""

from __future__ import annotations

from fastmcp import FastMCP

from ..tracing import trace
from ..types import FolderIdParam, OptionalWorkspaceIdParam, WorkspaceIdParam
from ._runner import READ_ONLY, run_tool

workspace_server = FastMCP("workspace")


@workspace_server.tool(annotations=READ_ONLY)
@trace(name="get_trackers", span_type="TOOL")
async def get_trackers(workspaceId: OptionalWorkspaceIdParam = None) -> str:
    """List keyword tracker definitions: name, affiliation, and tracked keywords."""
    return await run_tool("get_trackers", workspaceId=workspaceId)


@workspace_server.tool(annotations=READ_ONLY)
@trace(name="list_workspaces", span_type="TOOL")
async def list_workspaces() -> str:
    """List Gong workspaces with their IDs, for use as workspaceId filters."""
    return await run_tool("list_workspaces")


@workspace_server.tool(annotations=READ_ONLY)
@trace(name="list_library_folders", span_type="TOOL")
async def list_library_folders(workspaceId: WorkspaceIdParam) -> str:
    """List public call library folders in a workspace."""
    return await run_tool("list_library_folders", workspaceId=workspaceId)


@workspace_server.tool(annotations=READ_ONLY)
@trace(name="get_library_folder_calls", span_type="TOOL")
async def get_library_folder_calls(folderId: FolderIdParam) -> str:
    """List calls saved in a library folder, with clip timing and curator notes."""
    return await run_tool("get_library_folder_calls", folderId=folderId)
