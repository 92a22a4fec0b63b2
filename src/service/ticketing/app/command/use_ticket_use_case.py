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


class UseTicketUseCase:
    """Check a ticket in at the door. Admin only, and only once."""

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
    def execute(self, *, caller: str, ticket_id: str) -> bool:
        with metrics.track_operation('use_ticket'):
            with self.uow:
                require_admin(registry=self.uow.registry, caller=caller)

                ticket = self.uow.tickets.get_by_id(ticket_id=ticket_id)
                if ticket is None:
                    raise NotFoundError(f'Ticket {ticket_id} not found')
                ticket.validate_check_in()

                event = self.uow.events.get_by_id(event_id=ticket.event_id)
                if event is None:
                    raise NotFoundError(f'Event {ticket.event_id} not found')
                event.ensure_not_cancelled()

                self.uow.tickets.save(ticket=ticket.mark_as_used())
                self.uow.commit()

        Logger.base.info(f'✅ [USE_TICKET] {ticket_id} checked in')
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.TICKET_USED,
                payload={'ticket_id': ticket_id, 'event_id': ticket.event_id},
            )
        )
        return True
