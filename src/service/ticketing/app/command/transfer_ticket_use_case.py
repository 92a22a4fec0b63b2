from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError, NotOwnerError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class TransferTicketUseCase:
    """
    Move a ticket from from_owner to to_owner.

    Ownership is checked against from_owner, not the caller. With
    strict_transfer_auth the caller must also be from_owner.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        broadcaster: ILedgerBroadcaster,
        strict_transfer_auth: bool = False,
    ) -> None:
        self.uow = uow
        self.broadcaster = broadcaster
        self.strict_transfer_auth = strict_transfer_auth
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow]),
        broadcaster: ILedgerBroadcaster = Depends(Provide[Container.ledger_broadcaster]),
        config: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            uow=uow,
            broadcaster=broadcaster,
            strict_transfer_auth=config.STRICT_TRANSFER_AUTH,
        )

    @Logger.io
    def execute(self, *, caller: str, ticket_id: str, from_owner: str, to_owner: str) -> bool:
        """
        Raises:
            NotInitializedError: ledger was never initialized
            NotFoundError: ticket or its event does not exist
            NotOwnerError: from_owner does not hold the ticket
            TicketUsedError: ticket was already checked in
            TicketRefundedError: ticket was refunded
            EventCancelledError: the ticket's event was cancelled
        """
        with (
            self.tracer.start_as_current_span(
                'use_case.transfer_ticket',
                attributes={'ticket.id': ticket_id, 'caller': caller},
            ),
            metrics.track_operation('transfer_ticket'),
        ):
            with self.uow:
                ticket = self.uow.tickets.get_by_id(ticket_id=ticket_id)
                if ticket is None:
                    raise NotFoundError(f'Ticket {ticket_id} not found')

                if self.strict_transfer_auth and caller != from_owner:
                    raise NotOwnerError(f'{caller} cannot transfer on behalf of {from_owner}')

                ticket.validate_transfer(from_owner=from_owner)

                event = self.uow.events.get_by_id(event_id=ticket.event_id)
                if event is None:
                    raise NotFoundError(f'Event {ticket.event_id} not found')
                event.ensure_not_cancelled()

                self.uow.tickets.save(ticket=ticket.transfer_to(to_owner=to_owner))
                self.uow.commit()

        Logger.base.info(f'🔁 [TRANSFER] {ticket_id}: {from_owner} → {to_owner}')
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.TICKET_TRANSFERRED,
                payload={'ticket_id': ticket_id, 'from_owner': from_owner, 'to_owner': to_owner},
            )
        )
        return True
