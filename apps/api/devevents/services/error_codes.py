from enum import Enum


class ErrorCode(str, Enum):
    DEV_EVENT_NOT_FOUND = "DEV_EVENT_NOT_FOUND"
