from devevents.models.base import Base
from devevents.models.dev_event import DevEvent
from devevents.models.dev_event_speaker import DevEventSpeaker

__all__ = ["Base", "DevEvent", "DevEventSpeaker"]
