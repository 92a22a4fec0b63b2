from typing import TYPE_CHECKING, Any, Dict, Optional

from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.driven_adapter.state.ledger_codec import (
    ticket_from_dict,
    ticket_to_dict,
)
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import make_tickets_key


if TYPE_CHECKING:
    from src.platform.state.unit_of_work import LedgerSession


class TicketRepoImpl(ITicketRepo):
    """Ticket map slot: {ticket_id: ticket document}."""

    def __init__(self, *, session: 'LedgerSession') -> None:
        self.session = session

    def _ticket_map(self) -> Dict[str, Dict[str, Any]]:
        return self.session.read(make_tickets_key())

    def get_by_id(self, *, ticket_id: str) -> Optional[TicketEntity]:
        data = self._ticket_map().get(ticket_id)
        return ticket_from_dict(data) if data is not None else None

    def save(self, *, ticket: TicketEntity) -> TicketEntity:
        ticket_map = dict(self._ticket_map())
        ticket_map[ticket.id] = ticket_to_dict(ticket)
        self.session.stage(make_tickets_key(), ticket_map)
        return ticket
