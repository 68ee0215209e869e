from __future__ import annotations

import uuid
from collections.abc import Sequence

import structlog
from sqlalchemy import exists, select
from sqlalchemy.orm import Session, selectinload

from devevents.api.schemas.dev_events import DevEventIn, SpeakerIn
from devevents.models import DevEvent, DevEventSpeaker
from devevents.services.error_codes import ErrorCode
from devevents.services.exceptions import NotFoundError
from devevents.services.mapping import apply_dev_event_changes, new_dev_event, new_speaker

logger = structlog.get_logger(__name__)


def _not_found(event_id: uuid.UUID) -> NotFoundError:
    logger.warning("dev_event_not_found", event_id=str(event_id))
    return NotFoundError(ErrorCode.DEV_EVENT_NOT_FOUND.value, "dev event not found")


# Lookups by id deliberately skip the is_deleted filter: only the list hides
# soft-deleted events.
def _get_or_raise(db: Session, event_id: uuid.UUID) -> DevEvent:
    event = db.get(DevEvent, event_id)
    if not event:
        raise _not_found(event_id)
    return event


def list_dev_events(db: Session) -> Sequence[DevEvent]:
    return db.scalars(
        select(DevEvent)
        .options(selectinload(DevEvent.speakers))
        .where(DevEvent.is_deleted.is_(False))
    ).all()


def get_dev_event(db: Session, event_id: uuid.UUID) -> DevEvent:
    event = db.scalar(
        select(DevEvent)
        .options(selectinload(DevEvent.speakers))
        .where(DevEvent.id == event_id)
    )
    if not event:
        raise _not_found(event_id)
    return event


def create_dev_event(db: Session, payload: DevEventIn) -> DevEvent:
    event = new_dev_event(payload)
    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info("dev_event_created", event_id=str(event.id))
    return event


def update_dev_event(db: Session, event_id: uuid.UUID, payload: DevEventIn) -> DevEvent:
    event = _get_or_raise(db, event_id)

    apply_dev_event_changes(event, payload)
    db.add(event)
    db.commit()
    db.refresh(event)

    logger.info("dev_event_updated", event_id=str(event.id))
    return event


def delete_dev_event(db: Session, event_id: uuid.UUID) -> DevEvent:
    """Soft delete. Calling it on an already deleted event is a no-op overwrite."""
    event = _get_or_raise(db, event_id)

    event.is_deleted = True
    db.add(event)
    db.commit()

    logger.info("dev_event_deleted", event_id=str(event_id))
    return event


def add_speaker(db: Session, event_id: uuid.UUID, payload: SpeakerIn) -> DevEventSpeaker:
    # Existence check only; soft-deleted events still accept speakers.
    if not db.scalar(select(exists().where(DevEvent.id == event_id))):
        raise _not_found(event_id)

    speaker = new_speaker(event_id, payload)
    db.add(speaker)
    db.commit()
    db.refresh(speaker)

    logger.info("speaker_added", event_id=str(event_id), speaker_id=str(speaker.id))
    return speaker
