from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session

from devevents import services
from devevents.api.errors import http_error_from_service
from devevents.api.schemas import DevEventIn, DevEventOut, SpeakerIn
from devevents.db import get_db
from devevents.services.exceptions import ServiceError
from devevents.services.mapping import to_dev_event_out

router = APIRouter(prefix="/dev-events", tags=["dev-events"])

DBSession = Annotated[Session, Depends(get_db)]

NOT_FOUND_RESPONSE = {404: {"description": "Dev event not found"}}


@router.get("", response_model=list[DevEventOut])
def list_dev_events(db: DBSession):
    """All events that have not been soft-deleted, speakers included."""
    return [to_dev_event_out(event) for event in services.list_dev_events(db)]


@router.get("/{event_id}", response_model=DevEventOut, responses=NOT_FOUND_RESPONSE)
def get_dev_event(event_id: UUID, db: DBSession):
    """A single event by id. Soft-deleted events are still returned here."""
    try:
        event = services.get_dev_event(db, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return to_dev_event_out(event)


@router.post("", response_model=DevEventOut, status_code=status.HTTP_201_CREATED)
def create_dev_event(payload: DevEventIn, request: Request, response: Response, db: DBSession):
    event = services.create_dev_event(db, payload)
    response.headers["Location"] = str(request.url_for("get_dev_event", event_id=str(event.id)))
    return to_dev_event_out(event)


@router.put(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def update_dev_event(event_id: UUID, payload: DevEventIn, db: DBSession):
    try:
        services.update_dev_event(db, event_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{event_id}/speakers",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def add_speaker(event_id: UUID, payload: SpeakerIn, db: DBSession):
    try:
        services.add_speaker(db, event_id, payload)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSE,
)
def delete_dev_event(event_id: UUID, db: DBSession):
    try:
        services.delete_dev_event(db, event_id)
    except ServiceError as err:
        raise http_error_from_service(err) from err
    return Response(status_code=status.HTTP_204_NO_CONTENT)
