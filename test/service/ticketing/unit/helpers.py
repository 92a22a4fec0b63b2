"""
Shared helpers for ledger unit tests.

LedgerHarness builds every use case against one in-memory store, the same
way the DI container does for a running service.
"""

from unittest.mock import MagicMock

from src.platform.state.unit_of_work import LedgerUnitOfWork
from src.service.ticketing.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.initialize_ledger_use_case import InitializeLedgerUseCase
from src.service.ticketing.app.command.mint_ticket_use_case import MintTicketUseCase
from src.service.ticketing.app.command.set_admin_use_case import SetAdminUseCase
from src.service.ticketing.app.command.transfer_ticket_use_case import TransferTicketUseCase
from src.service.ticketing.app.command.use_ticket_use_case import UseTicketUseCase
from src.service.ticketing.app.query.get_admin_use_case import GetAdminUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.driven_adapter.state.in_memory_ledger_store import InMemoryLedgerStore


ADMIN = 'admin-wallet'
BUYER = 'buyer-wallet'
FRIEND = 'friend-wallet'
STRANGER = 'stranger-wallet'
FIXED_NOW = 1_767_225_600


class FixedClock:
    def __init__(self, now: int = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> int:
        return self._now


class LedgerHarness:
    def __init__(
        self,
        *,
        store: InMemoryLedgerStore | None = None,
        clock: FixedClock | None = None,
        strict_transfer_auth: bool = False,
    ) -> None:
        self.store = store or InMemoryLedgerStore()
        self.clock = clock or FixedClock()
        self.broadcaster = MagicMock()

        self.initialize_ledger = InitializeLedgerUseCase(
            uow=self._uow(), broadcaster=self.broadcaster
        )
        self.set_admin = SetAdminUseCase(uow=self._uow(), broadcaster=self.broadcaster)
        self.create_event = CreateEventUseCase(uow=self._uow(), broadcaster=self.broadcaster)
        self.cancel_event = CancelEventUseCase(uow=self._uow(), broadcaster=self.broadcaster)
        self.mint_ticket = MintTicketUseCase(
            uow=self._uow(), clock=self.clock, broadcaster=self.broadcaster
        )
        self.transfer_ticket = TransferTicketUseCase(
            uow=self._uow(),
            broadcaster=self.broadcaster,
            strict_transfer_auth=strict_transfer_auth,
        )
        self.use_ticket = UseTicketUseCase(uow=self._uow(), broadcaster=self.broadcaster)
        self.get_admin = GetAdminUseCase(uow=self._uow())
        self.get_event = GetEventUseCase(uow=self._uow())
        self.get_ticket = GetTicketUseCase(uow=self._uow())

    def _uow(self) -> LedgerUnitOfWork:
        return LedgerUnitOfWork(self.store)

    def snapshot(self) -> dict[str, bytes]:
        return dict(self.store._data)

    def published_types(self) -> list[str]:
        return [call.kwargs['change'].event_type for call in self.broadcaster.publish.call_args_list]

    def bootstrap_event(
        self,
        *,
        total_tickets: int = 1,
        ticket_price: int = 1000,
        title: str = 'Concert Event',
    ) -> str:
        """Initialize with ADMIN and create one event, returns the event id."""
        self.initialize_ledger.execute(admin=ADMIN)
        return self.create_event.create_event(
            caller=ADMIN,
            title=title,
            description='Amazing live music performance',
            total_tickets=total_tickets,
            ticket_price=ticket_price,
            event_date=FIXED_NOW + 86_400,
        )
