"""User listings and single-user profile view."""

from __future__ import annotations

from ..models.users import SingleUserResponse, User, UsersResponse
from ._markdown import PLACEHOLDER, cell, clip, escape_markdown, format_datetime, render_listing, yes_no


def _user_row(user: User) -> list[str]:
    return [
        user.id,
        escape_markdown(user.full_name) or PLACEHOLDER,
        cell(user.email_address),
        clip(user.title, 30),
        yes_no(user.active),
    ]


def format_users_response(response: UsersResponse) -> str:
    """Render ``GET /users`` and ``POST /users/extensive`` as a table."""
    return render_listing(
        "Users",
        response.records.total_records,
        empty_message="No users found.",
        headers=("ID", "Name", "Email", "Title", "Active"),
        rows=[_user_row(user) for user in response.users or []],
        cursor=response.records.cursor,
    )


def format_single_user(response: SingleUserResponse) -> str:
    user = response.user
    languages = ", ".join(
        f"{lang.language} (primary)" if lang.primary else lang.language
        for lang in user.spoken_languages or []
    )
    fields: list[tuple[str, str | None]] = [
        ("ID", user.id),
        ("Email", user.email_address),
        ("Title", user.title),
        ("Phone", user.phone_number),
        ("Active", None if user.active is None else yes_no(user.active)),
        ("Manager ID", user.manager_id),
        ("Created", format_datetime(user.created) if user.created else None),
        ("Languages", languages or None),
    ]
    lines = [f"## {escape_markdown(user.full_name or 'Unknown')}\n"]
    lines.extend(f"**{label}:** {value}" for label, value in fields if value)
    return "\n".join(lines)
