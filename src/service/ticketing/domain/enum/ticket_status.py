from enum import StrEnum


class TicketStatus(StrEnum):
    """Ticket status as seen at the gate, derived from the ticket and its event."""

    VALID = 'valid'
    USED = 'used'
    REFUNDED = 'refunded'
    CANCELLED = 'cancelled'
