from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

from devevents.api.schemas import DevEventIn, SpeakerIn
from devevents.models import DevEvent, DevEventSpeaker
from devevents.services.mapping import (
    apply_dev_event_changes,
    new_dev_event,
    new_speaker,
    to_dev_event_out,
)


def _event_in(**overrides) -> DevEventIn:
    data = {
        "title": "Conf",
        "description": "d",
        "startDate": "2024-01-01T00:00:00Z",
        "endDate": "2024-01-02T00:00:00Z",
    }
    data.update(overrides)
    return DevEventIn.model_validate(data)


def test_input_datetimes_are_normalized_to_utc():
    payload = _event_in(startDate="2024-01-01T02:00:00+02:00", endDate="2024-01-02T00:00:00")

    assert payload.start_date == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert payload.start_date.utcoffset() == timedelta(0)
    assert payload.end_date == datetime(2024, 1, 2, tzinfo=timezone.utc)


def test_new_dev_event_uses_entity_defaults():
    event = new_dev_event(_event_in())

    assert isinstance(event.id, uuid.UUID)
    assert event.title == "Conf"
    assert event.description == "d"
    assert event.is_deleted is False
    assert event.speakers == []


def test_new_dev_event_generates_distinct_ids():
    assert new_dev_event(_event_in()).id != new_dev_event(_event_in()).id


def test_apply_changes_leaves_identity_flags_and_speakers():
    event = new_dev_event(_event_in())
    event.is_deleted = True
    speaker = DevEventSpeaker(
        id=uuid.uuid4(),
        dev_event_id=event.id,
        name="n",
        talk_title="t",
        talk_description="td",
        linked_in_profile="l",
    )
    event.speakers.append(speaker)
    original_id = event.id

    apply_dev_event_changes(
        event,
        _event_in(title="New", description="nd", startDate="2025-01-01T00:00:00Z"),
    )

    assert event.id == original_id
    assert event.title == "New"
    assert event.description == "nd"
    assert event.start_date == datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert event.is_deleted is True
    assert event.speakers == [speaker]


def test_new_speaker_references_event():
    event_id = uuid.uuid4()
    speaker = new_speaker(
        event_id,
        SpeakerIn.model_validate(
            {
                "name": "Ada",
                "talkTitle": "Engines",
                "talkDescription": "Notes",
                "linkedInProfile": "https://www.linkedin.com/in/ada",
            }
        ),
    )

    assert isinstance(speaker, DevEventSpeaker)
    assert speaker.dev_event_id == event_id
    assert speaker.talk_title == "Engines"
    assert speaker.linked_in_profile == "https://www.linkedin.com/in/ada"


def test_to_dev_event_out_serializes_camel_case_in_utc():
    event = DevEvent(
        id=uuid.uuid4(),
        title="Conf",
        description="d",
        start_date=datetime(2024, 1, 1),
        end_date=datetime(2024, 1, 2),
        is_deleted=False,
    )
    speaker_id = uuid.uuid4()
    event.speakers.append(
        DevEventSpeaker(
            id=speaker_id,
            dev_event_id=event.id,
            name="Ada",
            talk_title="Engines",
            talk_description="Notes",
            linked_in_profile="https://www.linkedin.com/in/ada",
        )
    )

    body = to_dev_event_out(event).model_dump(mode="json", by_alias=True)

    assert body == {
        "id": str(event.id),
        "title": "Conf",
        "description": "d",
        "startDate": "2024-01-01T00:00:00Z",
        "endDate": "2024-01-02T00:00:00Z",
        "speakers": [
            {
                "id": str(speaker_id),
                "name": "Ada",
                "talkTitle": "Engines",
                "talkDescription": "Notes",
                "linkedInProfile": "https://www.linkedin.com/in/ada",
            }
        ],
    }
    assert "isDeleted" not in body
