import attrs

from src.platform.exception.exceptions import (
    NotOwnerError,
    TicketRefundedError,
    TicketUsedError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketEntity:
    id: str
    event_id: str
    owner: str
    purchase_date: int
    price: int = 0  # Snapshot of the event price at mint, informational only
    is_used: bool = False
    is_refunded: bool = False  # Reserved for a refund flow, nothing sets it yet

    @classmethod
    @Logger.io
    def create(
        cls, *, id: str, event_id: str, owner: str, purchase_date: int, price: int
    ) -> 'TicketEntity':
        return cls(
            id=id,
            event_id=event_id,
            owner=owner,
            purchase_date=purchase_date,
            price=price,
            is_used=False,
            is_refunded=False,
        )

    def _ensure_not_consumed(self) -> None:
        if self.is_used:
            raise TicketUsedError(f'Ticket {self.id} has already been used')
        if self.is_refunded:
            raise TicketRefundedError(f'Ticket {self.id} has been refunded')

    @Logger.io
    def validate_transfer(self, *, from_owner: str) -> None:
        """
        Domain checks for a transfer, in the order callers observe them.

        Raises:
            NotOwnerError: from_owner is not the stored owner
            TicketUsedError: ticket was checked in
            TicketRefundedError: ticket was refunded
        """
        if self.owner != from_owner:
            raise NotOwnerError(f'{from_owner} does not own ticket {self.id}')
        self._ensure_not_consumed()

    @Logger.io
    def transfer_to(self, *, to_owner: str) -> 'TicketEntity':
        return attrs.evolve(self, owner=to_owner)

    @Logger.io
    def validate_check_in(self) -> None:
        self._ensure_not_consumed()

    @Logger.io
    def mark_as_used(self) -> 'TicketEntity':
        self._ensure_not_consumed()
        return attrs.evolve(self, is_used=True)

    def is_valid_for(self, event: EventEntity) -> bool:
        return (
            not self.is_used
            and not self.is_refunded
            and not event.is_cancelled
            and event.is_active
        )

    def status_for(self, event: EventEntity) -> TicketStatus:
        if self.is_used:
            return TicketStatus.USED
        if self.is_refunded:
            return TicketStatus.REFUNDED
        if event.is_cancelled or not event.is_active:
            return TicketStatus.CANCELLED
        return TicketStatus.VALID
