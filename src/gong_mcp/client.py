"""Async Gong API v2 client.

Translates validated request models into the exact HTTP shapes the API
expects and parses every response through its contract. Errors surface as
:class:`~gong_mcp.errors.GongError` subclasses; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from .config import ServerConfig, get_config
from .errors import NetworkError, RemoteError, StructuralParseError
from .models.calls import (
    CallDetailsResponse,
    CallsResponse,
    SingleCallResponse,
    TranscriptsResponse,
)
from .models.common import parse_response
from .models.library import LibraryFolderCallsResponse, LibraryFoldersResponse
from .models.requests import (
    ListCallsRequest,
    ListUsersRequest,
    SearchCallsRequest,
    SearchUsersRequest,
)
from .models.settings import TrackersResponse, WorkspacesResponse
from .models.users import SingleUserResponse, UsersResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)

# Opt-in fields of POST /calls/extensive needed by the call summary.
CALL_SUMMARY_CONTENT_SELECTOR: dict[str, Any] = {
    "exposedFields": {
        "content": {
            "brief": True,
            "outline": True,
            "keyPoints": True,
            "topics": True,
            "pointsOfInterest": True,
            "callOutcome": True,
            "trackers": True,
        },
        "parties": True,
        "collaboration": {
            "publicComments": True,
        },
        "interaction": {
            "speakers": True,
            "questions": True,
        },
    },
}


def build_filter(**fields: Any) -> dict[str, Any]:
    """Build a request ``filter`` object, dropping unset values and empty lists."""
    return {key: value for key, value in fields.items() if value is not None and value != []}


def build_query(**params: Any) -> dict[str, str]:
    """Build query parameters, dropping unset values and lower-casing booleans."""
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        query[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return query


class GongClient:
    """Thin async wrapper over the Gong REST API."""

    def __init__(
        self,
        config: ServerConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            auth=httpx.BasicAuth(config.access_key, config.access_key_secret),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Issue one HTTP call and return the decoded JSON body.

        Raises:
            RemoteError: Non-2xx status (body text included).
            NetworkError: No response was received.
            StructuralParseError: The body is not JSON.
        """
        logger.debug("%s %s params=%s", method, path, sorted(params or {}))
        try:
            response = await self._http.request(method, path, params=params, json=body)
        except httpx.TransportError as exc:
            raise NetworkError(f"Gong API request failed: {method} {path}: {exc}") from exc

        if not response.is_success:
            logger.warning("Gong API %s %s -> %d", method, path, response.status_code)
            raise RemoteError(response.status_code, response.reason_phrase, response.text)

        try:
            return response.json()
        except ValueError as exc:
            raise StructuralParseError(
                f"Gong API returned non-JSON body for {method} {path}"
            ) from exc

    async def _get(self, path: str, model: type[ResponseT], **params: Any) -> ResponseT:
        data = await self._request("GET", path, params=build_query(**params))
        return parse_response(model, data)

    async def _post(self, path: str, model: type[ResponseT], body: dict[str, Any]) -> ResponseT:
        data = await self._request("POST", path, body=body)
        return parse_response(model, data)

    # ── Calls ────────────────────────────────────────────────────────────────

    async def list_calls(self, request: ListCallsRequest | None = None) -> CallsResponse:
        """List calls (``GET /calls``) with optional date/workspace filters."""
        request = request or ListCallsRequest()
        return await self._get(
            "/calls",
            CallsResponse,
            fromDateTime=request.from_date_time,
            toDateTime=request.to_date_time,
            workspaceId=request.workspace_id,
            cursor=request.cursor,
        )

    async def get_call(self, call_id: str) -> SingleCallResponse:
        """Fetch one call's metadata (``GET /calls/{id}``)."""
        return await self._get(f"/calls/{call_id}", SingleCallResponse)

    async def get_call_details(self, call_ids: list[str]) -> CallDetailsResponse:
        """Fetch extensive call data with AI content, parties and stats."""
        body = {
            "filter": build_filter(callIds=call_ids),
            "contentSelector": CALL_SUMMARY_CONTENT_SELECTOR,
        }
        return await self._post("/calls/extensive", CallDetailsResponse, body)

    async def search_calls(self, request: SearchCallsRequest) -> CallDetailsResponse:
        """Search calls by filter (``POST /calls/extensive``).

        No content selector is sent, so the API answers with metadata only.
        The cursor travels at the top level of the body, never in ``filter``.
        """
        body: dict[str, Any] = {
            "filter": build_filter(
                fromDateTime=request.from_date_time,
                toDateTime=request.to_date_time,
                workspaceId=request.workspace_id,
                primaryUserIds=request.primary_user_ids,
                callIds=request.call_ids,
            ),
        }
        if request.cursor:
            body["cursor"] = request.cursor
        return await self._post("/calls/extensive", CallDetailsResponse, body)

    async def get_transcripts(self, call_ids: list[str]) -> TranscriptsResponse:
        """Fetch transcripts (``POST /calls/transcript``)."""
        body = {"filter": build_filter(callIds=call_ids)}
        return await self._post("/calls/transcript", TranscriptsResponse, body)

    # ── Users ────────────────────────────────────────────────────────────────

    async def list_users(self, request: ListUsersRequest | None = None) -> UsersResponse:
        """List users (``GET /users``)."""
        request = request or ListUsersRequest()
        return await self._get(
            "/users",
            UsersResponse,
            cursor=request.cursor,
            includeAvatars=request.include_avatars,
        )

    async def get_user(self, user_id: str) -> SingleUserResponse:
        """Fetch one user (``GET /users/{id}``)."""
        return await self._get(f"/users/{user_id}", SingleUserResponse)

    async def search_users(self, request: SearchUsersRequest) -> UsersResponse:
        """Search users by filter (``POST /users/extensive``)."""
        body: dict[str, Any] = {
            "filter": build_filter(
                userIds=request.user_ids,
                createdFromDateTime=request.created_from_date_time,
                createdToDateTime=request.created_to_date_time,
            ),
        }
        if request.cursor:
            body["cursor"] = request.cursor
        return await self._post("/users/extensive", UsersResponse, body)

    # ── Settings & library ───────────────────────────────────────────────────

    async def get_trackers(self, workspace_id: str | None = None) -> TrackersResponse:
        """List keyword tracker definitions (``GET /settings/trackers``)."""
        return await self._get("/settings/trackers", TrackersResponse, workspaceId=workspace_id)

    async def list_workspaces(self) -> WorkspacesResponse:
        """List workspaces (``GET /workspaces``)."""
        return await self._get("/workspaces", WorkspacesResponse)

    async def list_library_folders(self, workspace_id: str) -> LibraryFoldersResponse:
        """List public library folders (``GET /library/folders``)."""
        return await self._get("/library/folders", LibraryFoldersResponse, workspaceId=workspace_id)

    async def get_library_folder_calls(self, folder_id: str) -> LibraryFolderCallsResponse:
        """List calls in a library folder (``GET /library/folder-content``)."""
        return await self._get(
            "/library/folder-content", LibraryFolderCallsResponse, folderId=folder_id
        )


_client: GongClient | None = None


def get_client() -> GongClient:
    """Return the process-wide client, building it from config on first use."""
    global _client
    if _client is None:
        cfg = get_config()
        _client = GongClient(cfg)
        logger.debug("Created Gong client for %s (key …%s)", cfg.base_url, cfg.access_key[-4:])
    return _client


async def close_client() -> bool:
    """Close the process-wide client. Returns True if one was open."""
    global _client
    if _client is None:
        return False
    client, _client = _client, None
    await client.aclose()
    return True
