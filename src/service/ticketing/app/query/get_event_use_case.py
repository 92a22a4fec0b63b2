from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow])) -> Self:
        return cls(uow=uow)

    @Logger.io
    def get_event(self, *, event_id: str) -> Optional[EventEntity]:
        """Absent events are a normal result here, not an error."""
        with self.uow:
            event = self.uow.events.get_by_id(event_id=event_id)

        if event is None:
            Logger.base.warning(f'⚠️ [GET_EVENT] Event {event_id} not found')
        return event

    @Logger.io
    def get_all_events(self) -> List[EventEntity]:
        """Events in creation (roster) order."""
        with self.uow:
            roster = self.uow.registry.get_roster()
            events = self.uow.events.get_many(event_ids=roster)

        Logger.base.info(f'🎫 [LIST_EVENTS] Found {len(events)} events')
        return events

    @Logger.io
    def get_event_ticket_count(self, *, event_id: str) -> int:
        with self.uow:
            event = self.uow.events.get_by_id(event_id=event_id)

        if event is None:
            raise NotFoundError(f'Event {event_id} not found')
        return event.tickets_sold
