from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from devevents.models.base import Base, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from devevents.models.dev_event_speaker import DevEventSpeaker


class DevEvent(Base, UUIDPrimaryKeyMixin):
    __tablename__ = "DevEvents"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    # Soft delete: rows are never removed, only hidden from the list endpoint
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    speakers: Mapped[list[DevEventSpeaker]] = relationship(
        back_populates="dev_event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
