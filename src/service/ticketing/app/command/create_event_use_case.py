from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.app.service.admin_gate import require_admin
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class CreateEventUseCase:
    """
    Create an event as the admin.

    Flow:
    1. Admin gate
    2. Allocate `event-<n>` from the shared counter
    3. Stage event map + roster + counter, commit once
    4. Publish event_created
    """

    def __init__(self, *, uow: AbstractUnitOfWork, broadcaster: ILedgerBroadcaster) -> None:
        self.uow = uow
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow]),
        broadcaster: ILedgerBroadcaster = Depends(Provide[Container.ledger_broadcaster]),
    ) -> Self:
        return cls(uow=uow, broadcaster=broadcaster)

    @Logger.io
    def create_event(
        self,
        *,
        caller: str,
        title: str,
        description: str,
        total_tickets: int,
        ticket_price: int,
        event_date: int,
    ) -> str:
        with metrics.track_operation('create_event'):
            with self.uow:
                require_admin(registry=self.uow.registry, caller=caller)

                event_id = self.uow.registry.next_id(kind='event')
                event = EventEntity.create(
                    id=event_id,
                    title=title,
                    description=description,
                    organizer=caller,
                    total_tickets=total_tickets,
                    ticket_price=ticket_price,
                    event_date=event_date,
                )
                self.uow.events.save(event=event)
                self.uow.registry.append_to_roster(event_id=event_id)
                self.uow.commit()

        Logger.base.info(f'🎫 [CREATE_EVENT] Created {event_id} ({total_tickets} tickets)')
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.EVENT_CREATED,
                payload={'event_id': event_id, 'title': title, 'total_tickets': total_tickets},
            )
        )
        return event_id
