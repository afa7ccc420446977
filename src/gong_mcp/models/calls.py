"""Call, call-details, and transcript response contracts.

Gong returns ``null`` for most empty fields, so everything except ids,
names that identify a record, and pagination totals is optional.
"""

from __future__ import annotations

from pydantic import Field

from .common import GongModel, Records


class Call(GongModel):
    """Minimal call record from ``GET /calls``."""

    id: str
    title: str | None = None
    scheduled: str | None = None
    started: str | None = None
    duration: float | None = None
    primary_user_id: str | None = None
    direction: str | None = None
    scope: str | None = None
    media: str | None = None
    language: str | None = None
    workspace_id: str | None = None
    url: str | None = None


class CallsResponse(GongModel):
    request_id: str | None = None
    records: Records
    calls: list[Call] | None = None


# ── Extensive call data ─────────────────────────────────────────────────────


class CallMetadata(GongModel):
    """``metaData`` block of an extensive call, also used by ``GET /calls/{id}``."""

    id: str
    url: str | None = None
    title: str | None = None
    scheduled: str | None = None
    started: str | None = None
    duration: float | None = None
    primary_user_id: str | None = None
    direction: str | None = None
    system: str | None = None
    scope: str | None = None
    media: str | None = None
    language: str | None = None
    workspace_id: str | None = None
    sdr_disposition: str | None = None
    client_unique_id: str | None = None
    custom_data: str | None = None
    purpose: str | None = None
    meeting_url: str | None = None
    is_private: bool | None = None
    calendar_event_id: str | None = None


class ContextField(GongModel):
    name: str
    value: str


class ContextObject(GongModel):
    object_type: str | None = None
    object_id: str | None = None
    fields: list[ContextField] | None = None
    timing: str | None = None


class CallContext(GongModel):
    """Link to an external system record (CRM, dialer, ...)."""

    system: str | None = None
    objects: list[ContextObject] | None = None


class Party(GongModel):
    """A call participant; ``speaker_id`` joins it to transcript monologues."""

    id: str | None = None
    email_address: str | None = None
    name: str | None = None
    title: str | None = None
    user_id: str | None = None
    speaker_id: str | None = None
    context: list[CallContext] | None = None
    affiliation: str | None = None
    phone_number: str | None = None
    methods: list[str] | None = None


class TrackerOccurrence(GongModel):
    start_time: float
    speaker_id: str | None = None


class TrackerHit(GongModel):
    id: str
    name: str
    count: int
    type: str | None = None
    occurrences: list[TrackerOccurrence] | None = None


class Topic(GongModel):
    name: str
    duration: float


class ActionItem(GongModel):
    snippet_start_time: float | None = None
    snippet_end_time: float | None = None
    speaker_ids: list[str] | None = None
    snippet: str | None = None


class PointsOfInterest(GongModel):
    action_items: list[ActionItem] | None = None


class OutlineItem(GongModel):
    text: str
    start_time: float | None = None


class OutlineSection(GongModel):
    section: str
    start_time: float | None = None
    duration: float | None = None
    items: list[OutlineItem] | None = None


class CallOutcome(GongModel):
    id: str | None = None
    category: str | None = None
    name: str | None = None


class KeyPoint(GongModel):
    text: str


class CallContent(GongModel):
    """AI-generated content; only present when requested by content selector."""

    trackers: list[TrackerHit] | None = None
    topics: list[Topic] | None = None
    points_of_interest: PointsOfInterest | None = None
    brief: str | None = None
    outline: list[OutlineSection] | None = None
    call_outcome: CallOutcome | None = None
    key_points: list[KeyPoint] | None = None


class SpeakerStats(GongModel):
    id: str
    visibility: float | None = None
    talk_time: float | None = None


class VideoSegment(GongModel):
    name: str
    duration: float


class QuestionStats(GongModel):
    company_count: int | None = None
    non_company_count: int | None = None


class Interaction(GongModel):
    speakers: list[SpeakerStats] | None = None
    interactivity: float | None = None
    video: list[VideoSegment] | None = None
    questions: QuestionStats | None = None


class PublicComment(GongModel):
    id: str
    audio_start_time: float | None = None
    audio_end_time: float | None = None
    commenter_user_id: str | None = None
    comment: str | None = None
    posted: str | None = None
    in_reply_to: str | None = None
    during_call: bool | None = None


class Collaboration(GongModel):
    public_comments: list[PublicComment] | None = None


class CallMedia(GongModel):
    audio_url: str | None = None
    video_url: str | None = None


class CallDetails(GongModel):
    """Extensive call record from ``POST /calls/extensive``."""

    meta_data: CallMetadata
    context: list[CallContext] | None = None
    parties: list[Party] | None = None
    content: CallContent | None = None
    interaction: Interaction | None = None
    collaboration: Collaboration | None = None
    media: CallMedia | None = None


class CallDetailsResponse(GongModel):
    request_id: str | None = None
    records: Records
    calls: list[CallDetails] | None = None


class SingleCallResponse(GongModel):
    request_id: str | None = None
    call: CallMetadata


# ── Transcripts ─────────────────────────────────────────────────────────────


class Sentence(GongModel):
    """One sentence; ``start``/``end`` are milliseconds from call start."""

    start: float
    end: float
    text: str


class Monologue(GongModel):
    speaker_id: str
    topic: str | None = None
    sentences: list[Sentence] = Field(default_factory=list)


class CallTranscript(GongModel):
    call_id: str
    transcript: list[Monologue] = Field(default_factory=list)


class TranscriptsResponse(GongModel):
    request_id: str | None = None
    records: Records
    call_transcripts: list[CallTranscript] | None = None
