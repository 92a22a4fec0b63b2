from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class MintTicketUseCase:
    """
    Mint (buy) one ticket for an event.

    The only multi-record write in the ledger: the event's tickets_sold,
    the new ticket and the counter go out in the same commit.

    Note:
        caller is recorded for tracing only. Purchases are not gated on
        caller == buyer.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        clock: IClock,
        broadcaster: ILedgerBroadcaster,
    ) -> None:
        self.uow = uow
        self.clock = clock
        self.broadcaster = broadcaster
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow]),
        clock: IClock = Depends(Provide[Container.clock]),
        broadcaster: ILedgerBroadcaster = Depends(Provide[Container.ledger_broadcaster]),
    ) -> Self:
        return cls(uow=uow, clock=clock, broadcaster=broadcaster)

    @Logger.io
    def mint_ticket(self, *, caller: str, event_id: str, buyer: str) -> str:
        """
        Raises:
            NotInitializedError: ledger was never initialized
            NotFoundError: event does not exist
            EventNotActiveError: event is inactive or cancelled
            SoldOutError: every ticket is already sold
        """
        with (
            self.tracer.start_as_current_span(
                'use_case.mint_ticket',
                attributes={'event.id': event_id, 'ticket.buyer': buyer, 'caller': caller},
            ),
            metrics.track_operation('mint_ticket'),
        ):
            with self.uow:
                event = self.uow.events.get_by_id(event_id=event_id)
                if event is None:
                    raise NotFoundError(f'Event {event_id} not found')

                sold_event = event.record_sale()

                ticket_id = self.uow.registry.next_id(kind='ticket')
                ticket = TicketEntity.create(
                    id=ticket_id,
                    event_id=event_id,
                    owner=buyer,
                    purchase_date=self.clock.now(),
                    price=event.ticket_price,
                )

                self.uow.events.save(event=sold_event)
                self.uow.tickets.save(ticket=ticket)
                self.uow.commit()

        metrics.record_ticket_minted(event_id=event_id)
        Logger.base.info(
            f'🎟️ [MINT] {ticket_id} for {buyer} '
            f'({sold_event.tickets_sold}/{sold_event.total_tickets} sold on {event_id})'
        )
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.TICKET_MINTED,
                payload={
                    'ticket_id': ticket_id,
                    'event_id': event_id,
                    'owner': buyer,
                    'tickets_sold': sold_event.tickets_sold,
                },
            )
        )
        return ticket_id

    def buy_ticket(self, *, caller: str, event_id: str, buyer: str) -> str:
        return self.mint_ticket(caller=caller, event_id=event_id, buyer=buyer)
