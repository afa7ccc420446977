"""Base model and shared shapes for Gong API payloads."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import StructuralParseError

ModelT = TypeVar("ModelT", bound=BaseModel)


class GongModel(BaseModel):
    """Immutable record with snake_case attributes and camelCase wire names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Records(GongModel):
    """Pagination block attached to paged responses."""

    total_records: int
    current_page_size: int
    current_page_number: int
    cursor: str | None = None


def format_issue_path(loc: tuple) -> str:
    """Render a pydantic error location as a dotted path (``calls.0.id``)."""
    return ".".join(str(part) for part in loc)


def parse_response(model: type[ModelT], data: object) -> ModelT:
    """Validate a decoded JSON payload against a response contract.

    Raises:
        StructuralParseError: If the payload does not match *model*.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        issues = [
            f"{format_issue_path(err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        ]
        raise StructuralParseError(
            f"Unexpected {model.__name__} payload: {'; '.join(issues)}"
        ) from exc
