from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken as UTC (SQLite hands them back without tzinfo)
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SchemaBase(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class UTCMixin(BaseModel):
    @field_validator("start_date", "end_date", mode="after", check_fields=False)
    @classmethod
    def _normalize_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class DevEventIn(UTCMixin, SchemaBase):
    title: str = Field(max_length=200)
    description: str
    start_date: datetime
    end_date: datetime


class SpeakerIn(SchemaBase):
    name: str
    talk_title: str
    talk_description: str
    linked_in_profile: str


class SpeakerOut(SchemaBase):
    id: UUID
    name: str
    talk_title: str
    talk_description: str
    linked_in_profile: str


class DevEventOut(UTCMixin, SchemaBase):
    id: UUID
    title: str
    description: str
    start_date: datetime
    end_date: datetime
    speakers: list[SpeakerOut] = Field(default_factory=list)
