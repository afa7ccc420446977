"""User response contracts."""

from __future__ import annotations

from typing import Any

from .common import GongModel, Records


class SpokenLanguage(GongModel):
    language: str
    primary: bool


class UserSettings(GongModel):
    web_conferences_recorded: bool | None = None
    prevent_web_conference_recording: bool | None = None
    telephony_calls_recorded: bool | None = None
    emails_recorded: bool | None = None
    prevent_email_recording: bool | None = None
    non_recorded_meetings_default_privacy: str | None = None
    gpi_settings: Any = None
    emails_imported: bool | None = None


class User(GongModel):
    id: str
    email_address: str | None = None
    created: str | None = None
    active: bool | None = None
    email_aliases: list[str] | None = None
    trusted_email_address: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    title: str | None = None
    phone_number: str | None = None
    extension: str | None = None
    personal_meeting_urls: list[str] | None = None
    settings: UserSettings | None = None
    manager_id: str | None = None
    meeting_consent_page_url: str | None = None
    spoken_languages: list[SpokenLanguage] | None = None

    @property
    def full_name(self) -> str:
        """First and last name joined by a space; empty when both are absent."""
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class UsersResponse(GongModel):
    """Shared by ``GET /users`` and ``POST /users/extensive``."""

    request_id: str | None = None
    records: Records
    users: list[User] | None = None


class SingleUserResponse(GongModel):
    request_id: str | None = None
    user: User
