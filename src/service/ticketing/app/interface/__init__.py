"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_clock import IClock
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.app.interface.i_ledger_registry_repo import ILedgerRegistryRepo
from src.service.ticketing.app.interface.i_ledger_store import ILedgerStore
from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo

__all__ = [
    'IClock',
    'IEventRepo',
    'ILedgerBroadcaster',
    'ILedgerRegistryRepo',
    'ILedgerStore',
    'ITicketRepo',
]
