from enum import StrEnum


class EventStatus(StrEnum):
    ACTIVE = 'active'
    CANCELLED = 'cancelled'
