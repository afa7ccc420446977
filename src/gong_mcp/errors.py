"""Error kinds, exception hierarchy, and the tool error envelope."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorKind(str, Enum):
    """Discriminant carried by every error this server raises."""

    VALIDATION = "VALIDATION"
    REMOTE = "REMOTE"
    STRUCTURAL = "STRUCTURAL"
    NOT_FOUND = "NOT_FOUND"
    NETWORK = "NETWORK"
    UNKNOWN = "UNKNOWN"


class GongError(Exception):
    """Base class for failures in the validate → fetch → format pipeline."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class RequestValidationError(GongError):
    """Tool arguments violate the request contract."""

    kind = ErrorKind.VALIDATION

    def __init__(self, issues: list[str]) -> None:
        self.issues = issues
        super().__init__(f"Validation error: {'; '.join(issues)}")


class RemoteError(GongError):
    """The Gong API answered with a non-success status."""

    kind = ErrorKind.REMOTE

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"Gong API error: {status_code} {reason} - {body}")


class StructuralParseError(GongError):
    """A response body did not match the expected contract."""

    kind = ErrorKind.STRUCTURAL


class NotFoundError(GongError):
    """A lookup succeeded but returned no record for the requested id."""

    kind = ErrorKind.NOT_FOUND


class NetworkError(GongError):
    """The request never produced an HTTP response (connect, timeout, ...)."""

    kind = ErrorKind.NETWORK


class ToolResult(BaseModel):
    """Text payload handed back to the MCP host."""

    text: str
    is_error: bool = False
    kind: ErrorKind | None = None


def categorize_error(error: Exception) -> ErrorKind:
    """Return the error kind, UNKNOWN for anything outside the taxonomy."""
    if isinstance(error, GongError):
        return error.kind
    return ErrorKind.UNKNOWN


def make_tool_error(error: Exception) -> ToolResult:
    """Wrap an exception in a single-line error result."""
    message = " ".join(str(error).split()) or type(error).__name__
    return ToolResult(text=f"Error: {message}", is_error=True, kind=categorize_error(error))
