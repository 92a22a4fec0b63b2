from typing import List, Optional, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


class GetTicketUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow])) -> Self:
        return cls(uow=uow)

    @Logger.io
    def get_ticket(self, *, ticket_id: str) -> Optional[TicketEntity]:
        with self.uow:
            return self.uow.tickets.get_by_id(ticket_id=ticket_id)

    def _load_with_event(self, *, ticket_id: str) -> Tuple[TicketEntity, EventEntity]:
        with self.uow:
            ticket = self.uow.tickets.get_by_id(ticket_id=ticket_id)
            if ticket is None:
                raise NotFoundError(f'Ticket {ticket_id} not found')

            event = self.uow.events.get_by_id(event_id=ticket.event_id)
            if event is None:
                raise NotFoundError(f'Event {ticket.event_id} not found')

        return ticket, event

    @Logger.io
    def is_ticket_valid(self, *, ticket_id: str) -> bool:
        """
        Unused, unrefunded, and its event is active and not cancelled.

        Raises:
            NotFoundError: ticket or its event does not exist
        """
        ticket, event = self._load_with_event(ticket_id=ticket_id)
        return ticket.is_valid_for(event)

    @Logger.io
    def get_ticket_status(self, *, ticket_id: str) -> TicketStatus:
        """
        Raises:
            NotFoundError: ticket or its event does not exist
        """
        ticket, event = self._load_with_event(ticket_id=ticket_id)
        return ticket.status_for(event)

    @Logger.io
    def get_user_tickets(self, *, owner: str) -> List[str]:
        # No owner index is kept, so this is always empty
        return []
