"""Conversions between the wire shapes and the persisted entities.

Everything here is pure: no session, no I/O. Fields an input shape does not
carry (``id``, ``is_deleted``, ``speakers``) keep their entity defaults.
"""

from __future__ import annotations

import uuid

from devevents.api.schemas.dev_events import DevEventIn, DevEventOut, SpeakerIn
from devevents.models import DevEvent, DevEventSpeaker


def new_dev_event(payload: DevEventIn) -> DevEvent:
    return DevEvent(
        id=uuid.uuid4(),
        title=payload.title,
        description=payload.description,
        start_date=payload.start_date,
        end_date=payload.end_date,
        is_deleted=False,
    )


def apply_dev_event_changes(event: DevEvent, payload: DevEventIn) -> DevEvent:
    """Overwrite the mutable fields only; id, is_deleted and speakers are left alone."""
    event.title = payload.title
    event.description = payload.description
    event.start_date = payload.start_date
    event.end_date = payload.end_date
    return event


def new_speaker(event_id: uuid.UUID, payload: SpeakerIn) -> DevEventSpeaker:
    return DevEventSpeaker(
        id=uuid.uuid4(),
        dev_event_id=event_id,
        name=payload.name,
        talk_title=payload.talk_title,
        talk_description=payload.talk_description,
        linked_in_profile=payload.linked_in_profile,
    )


def to_dev_event_out(event: DevEvent) -> DevEventOut:
    return DevEventOut.model_validate(event)
