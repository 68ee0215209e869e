from devevents.api.schemas.dev_events import (
    DevEventIn,
    DevEventOut,
    SpeakerIn,
    SpeakerOut,
)

__all__ = [
    "DevEventIn",
    "DevEventOut",
    "SpeakerIn",
    "SpeakerOut",
]
