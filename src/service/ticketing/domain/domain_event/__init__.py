"""Domain Events"""

from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent

__all__ = ['LedgerChangeEvent']
