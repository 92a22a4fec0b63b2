from enum import StrEnum


class LedgerChangeType(StrEnum):
    LEDGER_INITIALIZED = 'ledger_initialized'
    ADMIN_CHANGED = 'admin_changed'
    EVENT_CREATED = 'event_created'
    EVENT_CANCELLED = 'event_cancelled'
    TICKET_MINTED = 'ticket_minted'
    TICKET_TRANSFERRED = 'ticket_transferred'
    TICKET_USED = 'ticket_used'
