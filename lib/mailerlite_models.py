"""
mailerlite_models.py - Typed request/response models for MailerLite API v2
===========================================================================

One model per payload the v2 API sends or receives, grouped by endpoint
category (groups, segments, campaigns, stats). Request models serialize with
to_payload(); response models are built with model_validate() and ignore any
field MailerLite adds later.

USAGE:
    from mailerlite_models import NewSubscriber, NewCampaign, ListOptions

    subscriber = NewSubscriber(email="james.moon@example.com", name="James Moon",
                               fields={"company": "Megacorp Ltd", "city": "London"})
    campaign = NewCampaign(subject="Spring sale", groups=[2984475, 3237221])
    options = ListOptions(limit=10, offset=0, order="DESC")
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# Bools and numeric strings are rejected rather than coerced to an ID.
MailerLiteId = Annotated[int, Field(strict=True, ge=0)]


# ============================================================
# ENUMS
# ============================================================

class CampaignStatus(str, Enum):
    SENT = "sent"
    OUTBOX = "outbox"
    DRAFT = "draft"


class CampaignType(str, Enum):
    REGULAR = "regular"
    AB = "ab"


class SubscriberType(str, Enum):
    ACTIVE = "active"
    UNSUBSCRIBED = "unsubscribed"
    BOUNCED = "bounced"
    JUNK = "junk"
    UNCONFIRMED = "unconfirmed"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


# ============================================================
# BASE CLASSES
# ============================================================

class RequestModel(BaseModel):
    """Outgoing payloads reject unknown keys so typos fail before the network call."""
    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# ============================================================
# SHARED
# ============================================================

class ListOptions(RequestModel):
    """
    Sort and paginate options for list endpoints.

    Args:
        limit: Max number of items to return
        offset: Number of items to skip
        order: "ASC" or "DESC"
    """
    limit: Optional[int] = Field(default=None, ge=0, strict=True)
    offset: Optional[int] = Field(default=None, ge=0, strict=True)
    order: Optional[SortOrder] = None

    def to_query(self) -> Dict[str, Any]:
        return self.to_payload()


class Pagination(ResponseModel):
    count: int = 0
    current_page: int = 0
    per_page: int = 0
    total: int = 0
    total_pages: int = 0
    links: Any = None


# ============================================================
# GROUPS
# ============================================================

class NewSubscriber(RequestModel):
    """Subscriber payload for POST /groups/{id}/subscribers."""
    email: str
    name: Optional[str] = None
    fields: Optional[Dict[str, Any]] = None
    resubscribe: Optional[bool] = None
    autoresponders: Optional[bool] = None
    type: Optional[SubscriberType] = None

    @field_validator("email")
    @classmethod
    def _email_looks_valid(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value


class Subscriber(ResponseModel):
    id: int
    email: str
    name: Optional[str] = None
    type: Optional[str] = None
    sent: int = 0
    opened: int = 0
    clicked: int = 0
    date_created: Optional[str] = None
    fields: Any = None


class Group(ResponseModel):
    id: int
    name: str
    total: int = 0
    active: int = 0
    unsubscribed: int = 0
    bounced: int = 0
    unconfirmed: int = 0
    junk: int = 0
    sent: int = 0
    opened: int = 0
    clicked: int = 0
    date_created: Optional[str] = None
    date_updated: Optional[str] = None


# ============================================================
# SEGMENTS
# ============================================================

class SegmentRule(ResponseModel):
    operator: str
    args: List[Any] = []


class SegmentFilter(ResponseModel):
    rules: List[SegmentRule] = []


class Segment(ResponseModel):
    id: int
    title: str
    total: int = 0
    sent: int = 0
    opened: int = 0
    clicked: int = 0
    filter: Optional[SegmentFilter] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SegmentMeta(ResponseModel):
    pagination: Optional[Pagination] = None


class SegmentPage(ResponseModel):
    data: List[Segment] = []
    meta: Optional[SegmentMeta] = None


# ============================================================
# CAMPAIGNS
# ============================================================

class ABSettings(RequestModel):
    """Split-test settings, required when the campaign type is "ab"."""
    values: List[str]
    send_type: str
    ab_win_type: Optional[str] = None
    split_part: Optional[str] = None
    winner_after: Optional[int] = Field(default=None, ge=0)
    winner_after_type: Optional[str] = None


class NewCampaign(RequestModel):
    """Payload for POST /campaigns."""
    subject: str = Field(min_length=1)
    groups: List[MailerLiteId] = Field(min_length=1)
    type: CampaignType = Field(default=CampaignType.REGULAR, validate_default=True)
    segments: Optional[List[MailerLiteId]] = None
    language: Optional[str] = None
    ab_settings: Optional[ABSettings] = None

    @model_validator(mode="after")
    def _ab_needs_settings(self) -> "NewCampaign":
        if self.type == CampaignType.AB.value and self.ab_settings is None:
            raise ValueError("ab campaigns require ab_settings")
        return self


class CampaignContent(RequestModel):
    html: str = Field(min_length=1)
    plain: str = Field(min_length=1)


class CampaignSchedule(RequestModel):
    """
    Delivery options for POST /campaigns/{id}/actions/send.

    type 1 sends now, type 2 schedules for `date` ("YYYY-MM-DD HH:MM").
    """
    type: int = Field(default=1, ge=1, le=2)
    date: Optional[str] = None
    timezone_id: Optional[int] = None

    @model_validator(mode="after")
    def _scheduled_needs_date(self) -> "CampaignSchedule":
        if self.type == 2 and not self.date:
            raise ValueError("scheduled sends require a date")
        return self


class RateCount(ResponseModel):
    count: int = 0
    rate: float = 0


class Campaign(ResponseModel):
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    total_recipients: int = 0
    opened: Optional[RateCount] = None
    clicked: Optional[RateCount] = None
    date_created: Optional[str] = None
    date_send: Optional[str] = None


class CampaignOptions(ResponseModel):
    campaign_type: Optional[str] = None
    campaign_step: Optional[str] = None
    date: Optional[str] = None
    send_type: Optional[str] = None


class NewCampaignResponse(ResponseModel):
    id: int
    account_id: Optional[int] = None
    mail_id: Optional[int] = None
    campaign_type: Optional[str] = None
    date: Optional[str] = None
    options: Optional[CampaignOptions] = None


# ============================================================
# STATS
# ============================================================

class Stats(ResponseModel):
    subscribed: int = 0
    unsubscribed: int = 0
    campaigns: int = 0
    sent_emails: int = 0
    open_rate: float = 0.0
    click_rate: float = 0.0
    bounce_rate: float = 0.0
