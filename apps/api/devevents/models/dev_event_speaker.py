from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devevents.models.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from devevents.models.dev_event import DevEvent


class DevEventSpeaker(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "DevEventSpeakers"

    dev_event_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("DevEvents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    talk_title: Mapped[str] = mapped_column(Text, nullable=False)
    talk_description: Mapped[str] = mapped_column(Text, nullable=False)
    linked_in_profile: Mapped[str] = mapped_column(Text, nullable=False)

    dev_event: Mapped[DevEvent] = relationship(back_populates="speakers")
