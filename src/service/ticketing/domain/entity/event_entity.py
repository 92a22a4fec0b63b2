import attrs

from src.platform.exception.exceptions import (
    AlreadyCancelledError,
    EventCancelledError,
    EventNotActiveError,
    SoldOutError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.event_status import EventStatus


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'Event {attribute.name} cannot be negative')
    if value > INT64_MAX:
        raise ValueError(f'Event {attribute.name} exceeds the 64-bit range')


def _validate_int64(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f'Event {attribute.name} exceeds the 64-bit range')


def _validate_tickets_sold(instance: 'EventEntity', attribute: attrs.Attribute, value: int) -> None:
    if value < 0 or value > instance.total_tickets:
        raise ValueError(
            f'tickets_sold must be between 0 and total_tickets ({instance.total_tickets})'
        )


@attrs.define
class EventEntity:
    id: str
    title: str
    description: str
    organizer: str
    total_tickets: int = attrs.field(validator=_validate_non_negative)
    ticket_price: int = attrs.field(validator=_validate_int64)
    event_date: int = attrs.field(validator=_validate_non_negative)
    tickets_sold: int = attrs.field(default=0, validator=_validate_tickets_sold)
    is_active: bool = True
    is_cancelled: bool = False

    def __attrs_post_init__(self) -> None:
        if self.is_cancelled and self.is_active:
            raise ValueError('A cancelled event cannot be active')

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: str,
        title: str,
        description: str,
        organizer: str,
        total_tickets: int,
        ticket_price: int,
        event_date: int,
    ) -> 'EventEntity':
        # Zero capacity and negative price are accepted as-is
        return cls(
            id=id,
            title=title,
            description=description,
            organizer=organizer,
            total_tickets=total_tickets,
            ticket_price=ticket_price,
            event_date=event_date,
            tickets_sold=0,
            is_active=True,
            is_cancelled=False,
        )

    @property
    def available_tickets(self) -> int:
        return self.total_tickets - self.tickets_sold

    @property
    def status(self) -> EventStatus:
        return EventStatus.CANCELLED if self.is_cancelled else EventStatus.ACTIVE

    @Logger.io
    def record_sale(self) -> 'EventEntity':
        """
        Count one more sold ticket.

        Raises:
            EventNotActiveError: event is inactive or cancelled
            SoldOutError: capacity already reached
        """
        if not self.is_active or self.is_cancelled:
            raise EventNotActiveError(f'Event {self.id} is not active')
        if self.tickets_sold >= self.total_tickets:
            raise SoldOutError(f'Event {self.id} is sold out')
        return attrs.evolve(self, tickets_sold=self.tickets_sold + 1)

    @Logger.io
    def cancel(self) -> 'EventEntity':
        if self.is_cancelled:
            raise AlreadyCancelledError(f'Event {self.id} is already cancelled')
        return attrs.evolve(self, is_cancelled=True, is_active=False)

    def ensure_not_cancelled(self) -> None:
        if self.is_cancelled:
            raise EventCancelledError(f'Event {self.id} has been cancelled')
