"""Tests for per-tool request contracts and their error reporting."""

from __future__ import annotations

import pytest

from gong_mcp.errors import ErrorKind, RequestValidationError
from gong_mcp.models.requests import (
    CallIdRequest,
    GetCallTranscriptRequest,
    GetTrackersRequest,
    ListCallsRequest,
    ListLibraryFoldersRequest,
    ListUsersRequest,
    SearchCallsRequest,
    SearchUsersRequest,
    parse_request,
)


class TestParseRequest:
    def test_none_means_no_arguments(self):
        request = parse_request(ListCallsRequest, None)
        assert request.from_date_time is None
        assert request.cursor is None

    def test_reads_camel_case_keys(self):
        request = parse_request(
            ListCallsRequest,
            {
                "fromDateTime": "2024-01-01T00:00:00Z",
                "toDateTime": "2024-02-01T00:00:00Z",
                "workspaceId": "77",
                "cursor": "next",
            },
        )
        assert request.from_date_time == "2024-01-01T00:00:00Z"
        assert request.to_date_time == "2024-02-01T00:00:00Z"
        assert request.workspace_id == "77"
        assert request.cursor == "next"

    def test_unknown_keys_ignored(self):
        request = parse_request(CallIdRequest, {"callId": "1", "verbose": True})
        assert request.call_id == "1"

    def test_requests_are_immutable(self):
        request = parse_request(CallIdRequest, {"callId": "1"})
        with pytest.raises(Exception):
            request.call_id = "2"

    def test_bad_identifier_names_field(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(CallIdRequest, {"callId": "abc"})
        assert str(exc_info.value) == (
            "Validation error: callId: Must be a numeric string up to 20 digits"
        )
        assert exc_info.value.kind is ErrorKind.VALIDATION

    def test_missing_required_field(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(CallIdRequest, {})
        assert exc_info.value.issues[0].startswith("callId: ")

    def test_integer_identifier_rejected(self):
        with pytest.raises(RequestValidationError):
            parse_request(CallIdRequest, {"callId": 123})

    def test_every_issue_reported(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(GetCallTranscriptRequest, {"callId": "x", "maxLength": 5})
        assert len(exc_info.value.issues) == 2
        assert "; " in str(exc_info.value)

    def test_non_object_arguments_rejected(self):
        with pytest.raises(RequestValidationError):
            parse_request(CallIdRequest, "1")


class TestDateRange:
    def test_bad_timestamp(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(ListCallsRequest, {"fromDateTime": "2024-01-01"})
        assert "fromDateTime: Must be a valid ISO 8601 datetime" in str(exc_info.value)

    def test_reversed_range_rejected(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(
                ListCallsRequest,
                {"fromDateTime": "2024-02-01T00:00:00Z", "toDateTime": "2024-01-01T00:00:00Z"},
            )
        assert str(exc_info.value) == (
            "Validation error: fromDateTime must be before toDateTime"
        )

    def test_equal_bounds_rejected(self):
        with pytest.raises(RequestValidationError):
            parse_request(
                SearchCallsRequest,
                {"fromDateTime": "2024-01-01T00:00:00Z", "toDateTime": "2024-01-01T00:00:00Z"},
            )

    def test_single_bound_accepted(self):
        request = parse_request(SearchCallsRequest, {"toDateTime": "2024-01-01T00:00:00Z"})
        assert request.to_date_time == "2024-01-01T00:00:00Z"

    def test_user_creation_range_has_no_ordering_rule(self):
        request = parse_request(
            SearchUsersRequest,
            {
                "createdFromDateTime": "2024-02-01T00:00:00Z",
                "createdToDateTime": "2024-01-01T00:00:00Z",
            },
        )
        assert request.created_from_date_time == "2024-02-01T00:00:00Z"


class TestIdLists:
    def test_list_of_ids(self):
        request = parse_request(SearchCallsRequest, {"callIds": ["1", "2"]})
        assert request.call_ids == ["1", "2"]

    def test_json_string_list_coerced(self):
        """GIVEN an MCP host that serialized the array as a JSON string THEN it is parsed."""
        request = parse_request(SearchCallsRequest, {"primaryUserIds": '["10", "20"]'})
        assert request.primary_user_ids == ["10", "20"]

    def test_bad_element_reports_index(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(SearchCallsRequest, {"callIds": ["1", "x"]})
        assert "callIds.1: Must be a numeric string up to 20 digits" in str(exc_info.value)

    def test_user_ids(self):
        request = parse_request(SearchUsersRequest, {"userIds": ["5"]})
        assert request.user_ids == ["5"]


class TestTranscriptRequest:
    def test_defaults(self):
        request = parse_request(GetCallTranscriptRequest, {"callId": "1"})
        assert request.max_length == 10000
        assert request.offset == 0

    @pytest.mark.parametrize("max_length", [1000, 100000])
    def test_bounds_inclusive(self, max_length):
        request = parse_request(GetCallTranscriptRequest, {"callId": "1", "maxLength": max_length})
        assert request.max_length == max_length

    @pytest.mark.parametrize("max_length", [999, 100001, 0])
    def test_out_of_range_max_length(self, max_length):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(GetCallTranscriptRequest, {"callId": "1", "maxLength": max_length})
        assert "maxLength" in str(exc_info.value)

    def test_negative_offset(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(GetCallTranscriptRequest, {"callId": "1", "offset": -1})
        assert "offset" in str(exc_info.value)


class TestOtherRequests:
    def test_list_users_flags(self):
        request = parse_request(ListUsersRequest, {"includeAvatars": True})
        assert request.include_avatars is True

    def test_empty_cursor_rejected(self):
        with pytest.raises(RequestValidationError) as exc_info:
            parse_request(ListUsersRequest, {"cursor": ""})
        assert "cursor: Must be a non-empty cursor" in str(exc_info.value)

    def test_trackers_workspace_optional(self):
        assert parse_request(GetTrackersRequest, {}).workspace_id is None

    def test_library_folders_require_workspace(self):
        with pytest.raises(RequestValidationError):
            parse_request(ListLibraryFoldersRequest, {})
