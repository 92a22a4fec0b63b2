"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType
from src.service.ticketing.domain.enum.ticket_status import TicketStatus

__all__ = ['EventStatus', 'LedgerChangeType', 'TicketStatus']
