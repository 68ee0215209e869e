from devevents.services.dev_events_service import (
    add_speaker,
    create_dev_event,
    delete_dev_event,
    get_dev_event,
    list_dev_events,
    update_dev_event,
)

__all__ = [
    "list_dev_events",
    "get_dev_event",
    "create_dev_event",
    "update_dev_event",
    "delete_dev_event",
    "add_speaker",
]
