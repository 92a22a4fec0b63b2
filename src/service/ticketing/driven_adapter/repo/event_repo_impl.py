from typing import TYPE_CHECKING, Any, Dict, List, Optional

from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.state.ledger_codec import (
    event_from_dict,
    event_to_dict,
)
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import make_events_key


if TYPE_CHECKING:
    from src.platform.state.unit_of_work import LedgerSession


class EventRepoImpl(IEventRepo):
    """Event map slot: {event_id: event document}."""

    def __init__(self, *, session: 'LedgerSession') -> None:
        self.session = session

    def _event_map(self) -> Dict[str, Dict[str, Any]]:
        return self.session.read(make_events_key())

    def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        data = self._event_map().get(event_id)
        return event_from_dict(data) if data is not None else None

    def get_many(self, *, event_ids: List[str]) -> List[EventEntity]:
        event_map = self._event_map()
        return [event_from_dict(event_map[eid]) for eid in event_ids if eid in event_map]

    def save(self, *, event: EventEntity) -> EventEntity:
        event_map = dict(self._event_map())
        event_map[event.id] = event_to_dict(event)
        self.session.stage(make_events_key(), event_map)
        return event
