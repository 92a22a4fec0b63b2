from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.app.service.admin_gate import require_admin
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class CancelEventUseCase:
    """
    Cancel an event as the admin.

    Tickets are left untouched. Refunds are the job of whoever listens
    for the event_cancelled change notification.
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
    def execute(self, *, caller: str, event_id: str) -> bool:
        with metrics.track_operation('cancel_event'):
            with self.uow:
                require_admin(registry=self.uow.registry, caller=caller)

                event = self.uow.events.get_by_id(event_id=event_id)
                if event is None:
                    raise NotFoundError(f'Event {event_id} not found')

                cancelled = self.uow.events.save(event=event.cancel())
                self.uow.commit()

        metrics.record_event_cancelled()
        Logger.base.info(
            f'🚫 [CANCEL_EVENT] Cancelled {event_id} with {cancelled.tickets_sold} tickets sold'
        )
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.EVENT_CANCELLED,
                payload={'event_id': event_id, 'tickets_sold': cancelled.tickets_sold},
            )
        )
        return True
