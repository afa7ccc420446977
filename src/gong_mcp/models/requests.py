"""Per-tool request contracts.

Every tool validates its raw argument bag through one of these models before
any network call. Field-level rules come from :mod:`gong_mcp.validation`;
the only cross-field rule is the date-range ordering check.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..errors import RequestValidationError
from ..types import coerce_json_param
from ..validation import (
    Rejected,
    is_before,
    validate_cursor,
    validate_identifier,
    validate_timestamp,
)
from .common import format_issue_path

RequestT = TypeVar("RequestT", bound=BaseModel)

DEFAULT_TRANSCRIPT_MAX_LENGTH = 10000
MIN_TRANSCRIPT_MAX_LENGTH = 1000
MAX_TRANSCRIPT_MAX_LENGTH = 100000


def _enforce(check: Callable[[object], Any], error_type: str) -> AfterValidator:
    """Adapt a primitive validator into a pydantic field hook."""

    def _run(value: object) -> Any:
        result = check(value)
        if isinstance(result, Rejected):
            raise PydanticCustomError(error_type, result.reason)
        return result

    return AfterValidator(_run)


GongId = Annotated[str, _enforce(validate_identifier, "gong_id")]
Timestamp = Annotated[str, _enforce(validate_timestamp, "iso_datetime")]
Cursor = Annotated[str, _enforce(validate_cursor, "cursor")]


class RequestModel(BaseModel):
    """Immutable tool arguments; camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class _DateRangeRequest(RequestModel):
    from_date_time: Timestamp | None = None
    to_date_time: Timestamp | None = None

    @model_validator(mode="after")
    def _check_date_range(self):
        if self.from_date_time and self.to_date_time:
            if not is_before(self.from_date_time, self.to_date_time):
                raise PydanticCustomError(
                    "date_range", "fromDateTime must be before toDateTime"
                )
        return self


class ListCallsRequest(_DateRangeRequest):
    workspace_id: GongId | None = None
    cursor: Cursor | None = None


class SearchCallsRequest(_DateRangeRequest):
    workspace_id: GongId | None = None
    primary_user_ids: list[GongId] | None = None
    call_ids: list[GongId] | None = None
    cursor: Cursor | None = None

    @field_validator("primary_user_ids", "call_ids", mode="before")
    @classmethod
    def _coerce_id_lists(cls, value: Any) -> Any:
        return coerce_json_param(value, list)


class CallIdRequest(RequestModel):
    """Arguments of ``get_call`` and ``get_call_summary``."""

    call_id: GongId


class GetCallTranscriptRequest(RequestModel):
    call_id: GongId
    max_length: Annotated[
        int, Field(ge=MIN_TRANSCRIPT_MAX_LENGTH, le=MAX_TRANSCRIPT_MAX_LENGTH)
    ] = DEFAULT_TRANSCRIPT_MAX_LENGTH
    offset: Annotated[int, Field(ge=0)] = 0


class ListUsersRequest(RequestModel):
    cursor: Cursor | None = None
    include_avatars: bool | None = None


class SearchUsersRequest(RequestModel):
    user_ids: list[GongId] | None = None
    created_from_date_time: Timestamp | None = None
    created_to_date_time: Timestamp | None = None
    cursor: Cursor | None = None

    @field_validator("user_ids", mode="before")
    @classmethod
    def _coerce_id_list(cls, value: Any) -> Any:
        return coerce_json_param(value, list)


class GetUserRequest(RequestModel):
    user_id: GongId


class GetTrackersRequest(RequestModel):
    workspace_id: GongId | None = None


class ListWorkspacesRequest(RequestModel):
    pass


class ListLibraryFoldersRequest(RequestModel):
    workspace_id: GongId


class GetLibraryFolderCallsRequest(RequestModel):
    folder_id: GongId


def _describe(error: dict) -> str:
    path = format_issue_path(error["loc"])
    return f"{path}: {error['msg']}" if path else error["msg"]


def parse_request(model: type[RequestT], arguments: object) -> RequestT:
    """Validate a raw tool argument bag; ``None`` counts as no arguments.

    Raises:
        RequestValidationError: Listing every violation with its field path.
    """
    try:
        return model.model_validate({} if arguments is None else arguments)
    except ValidationError as exc:
        raise RequestValidationError([_describe(err) for err in exc.errors()]) from exc
