"""Shared type aliases and helpers for tool parameters."""

from __future__ import annotations

import json
from typing import Annotated

from pydantic import Field


def coerce_json_param(value: str | dict | list | None, expected_type: type) -> dict | list | None:
    """Parse MCP JSON-RPC string params back to dict/list.

    MCP JSON-RPC transport may serialize dict/list params as JSON strings.
    Pydantic v2 rejects these; this helper coerces them back.

    Args:
        value: The parameter value (possibly a JSON string).
        expected_type: Expected Python type (``dict`` or ``list``).

    Returns:
        Parsed value if coercion succeeded, original value otherwise.
    """
    if not isinstance(value, str):
        return value
    try:
        parsed = json.loads(value)
        if isinstance(parsed, expected_type):
            return parsed
    except (json.JSONDecodeError, TypeError):
        pass
    return value


# ── Annotated aliases ────────────────────────────────────────────────────────
# Types are kept loose and constraints live in the JSON schema only. The
# request models in ``models.requests`` are the sole validator, so a wrong type
# is reported the same way as any other invalid argument.

_ID_SCHEMA = {"pattern": "^[0-9]{1,20}$"}
_DATETIME_SCHEMA = {
    "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2})$",
}

CallIdParam = Annotated[str | int, Field(
    description="Gong call ID (numeric string up to 20 digits)",
    json_schema_extra=_ID_SCHEMA,
)]
UserIdParam = Annotated[str | int, Field(
    description="Gong user ID (numeric string up to 20 digits)",
    json_schema_extra=_ID_SCHEMA,
)]
FolderIdParam = Annotated[str | int, Field(
    description="Library folder ID from list_library_folders (numeric string up to 20 digits)",
    json_schema_extra=_ID_SCHEMA,
)]
WorkspaceIdParam = Annotated[str | int, Field(
    description="Workspace ID from list_workspaces (numeric string up to 20 digits)",
    json_schema_extra=_ID_SCHEMA,
)]
OptionalWorkspaceIdParam = Annotated[str | int | None, Field(
    description="Filter by workspace ID (numeric string up to 20 digits)",
    json_schema_extra=_ID_SCHEMA,
)]
CursorParam = Annotated[str | int | None, Field(
    description="Pagination cursor for fetching the next page of results",
    json_schema_extra={"minLength": 1},
)]
FromDateTimeParam = Annotated[str | int | None, Field(
    description=(
        "Start date/time in ISO 8601 format (e.g., 2024-01-01T00:00:00Z). "
        "Must be before the end date/time if both are specified."
    ),
    json_schema_extra=_DATETIME_SCHEMA,
)]
ToDateTimeParam = Annotated[str | int | None, Field(
    description=(
        "End date/time in ISO 8601 format (e.g., 2024-01-31T23:59:59Z). "
        "Must be after the start date/time if both are specified."
    ),
    json_schema_extra=_DATETIME_SCHEMA,
)]
IdListParam = Annotated[list[str | int] | str | int | None, Field(
    description="List of Gong IDs (numeric strings up to 20 digits)",
)]
MaxLengthParam = Annotated[int | float | str, Field(
    description=(
        "Maximum characters to return (default: 10000). Longer transcripts are "
        "truncated with pagination info."
    ),
    json_schema_extra={"minimum": 1000, "maximum": 100000},
)]
OffsetParam = Annotated[int | float | str, Field(
    description="Character offset to start from (default: 0). Use to paginate long transcripts.",
    json_schema_extra={"minimum": 0},
)]
