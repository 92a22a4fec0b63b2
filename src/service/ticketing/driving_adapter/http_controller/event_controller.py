from typing import List

import attrs
from fastapi import APIRouter, Depends, HTTPException, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.mint_ticket_use_case import MintTicketUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driving_adapter.http_controller.auth.caller_identity import (
    get_caller_id,
)
from src.service.ticketing.driving_adapter.schema.admin_schema import SuccessResponse
from src.service.ticketing.driving_adapter.schema.event_schema import (
    CreatedIdResponse,
    EventCreateRequest,
    EventResponse,
    EventTicketCountResponse,
    MintTicketRequest,
)


router = APIRouter()


def _to_event_response(event: EventEntity) -> EventResponse:
    return EventResponse(
        **attrs.asdict(event),
        available_tickets=event.available_tickets,
        status=event.status.value,
    )


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    caller_id: str = Depends(get_caller_id),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> CreatedIdResponse:
    event_id = use_case.create_event(
        caller=caller_id,
        title=request.title,
        description=request.description,
        total_tickets=request.total_tickets,
        ticket_price=request.ticket_price,
        event_date=request.event_date,
    )
    return CreatedIdResponse(id=event_id)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> List[EventResponse]:
    return [_to_event_response(event) for event in use_case.get_all_events()]


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = use_case.get_event(event_id=event_id)
    if event is None:
        raise HTTPException(status_code=404, detail=f'Event not found: {event_id}')
    return _to_event_response(event)


@router.get('/{event_id}/ticket_count', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event_ticket_count(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventTicketCountResponse:
    tickets_sold = use_case.get_event_ticket_count(event_id=event_id)
    return EventTicketCountResponse(event_id=event_id, tickets_sold=tickets_sold)


@router.post('/{event_id}/cancel', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_event(
    event_id: str,
    caller_id: str = Depends(get_caller_id),
    use_case: CancelEventUseCase = Depends(CancelEventUseCase.depends),
) -> SuccessResponse:
    success = use_case.execute(caller=caller_id, event_id=event_id)
    return SuccessResponse(success=success)


@router.post('/{event_id}/ticket', status_code=status.HTTP_201_CREATED)
@Logger.io
async def buy_ticket(
    event_id: str,
    request: MintTicketRequest,
    caller_id: str = Depends(get_caller_id),
    use_case: MintTicketUseCase = Depends(MintTicketUseCase.depends),
) -> CreatedIdResponse:
    ticket_id = use_case.buy_ticket(caller=caller_id, event_id=event_id, buyer=request.buyer)
    return CreatedIdResponse(id=ticket_id)
