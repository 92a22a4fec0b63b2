"""orjson encoding for ledger slot documents and the entities inside them."""

from typing import Any, Dict

import attrs
import orjson

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


def encode_document(document: Any) -> bytes:
    return orjson.dumps(document)


def decode_document(raw: bytes | str) -> Any:
    return orjson.loads(raw)


def event_to_dict(event: EventEntity) -> Dict[str, Any]:
    return attrs.asdict(event)


def event_from_dict(data: Dict[str, Any]) -> EventEntity:
    return EventEntity(**data)


def ticket_to_dict(ticket: TicketEntity) -> Dict[str, Any]:
    return attrs.asdict(ticket)


def ticket_from_dict(data: Dict[str, Any]) -> TicketEntity:
    return TicketEntity(**data)
