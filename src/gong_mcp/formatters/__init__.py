"""Compact markdown renderings of Gong API responses.

Every formatter is a pure function of its validated response model.
"""

from .calls import (
    format_call_details_response,
    format_call_summary,
    format_calls_response,
    format_single_call,
)
from .library import format_library_folder_calls_response, format_library_folders_response
from .settings import format_trackers_response, format_workspaces_response
from .transcript import format_call_transcript
from .users import format_single_user, format_users_response

__all__ = [
    "format_call_details_response",
    "format_call_summary",
    "format_call_transcript",
    "format_calls_response",
    "format_library_folder_calls_response",
    "format_library_folders_response",
    "format_single_call",
    "format_single_user",
    "format_trackers_response",
    "format_users_response",
    "format_workspaces_response",
]
