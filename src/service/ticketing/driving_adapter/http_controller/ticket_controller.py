import attrs
from fastapi import APIRouter, Depends, HTTPException, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.transfer_ticket_use_case import TransferTicketUseCase
from src.service.ticketing.app.command.use_ticket_use_case import UseTicketUseCase
from src.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from src.service.ticketing.driving_adapter.http_controller.auth.caller_identity import (
    get_caller_id,
)
from src.service.ticketing.driving_adapter.schema.admin_schema import SuccessResponse
from src.service.ticketing.driving_adapter.schema.ticket_schema import (
    TicketResponse,
    TicketTransferRequest,
    TicketValidityResponse,
    UserTicketsResponse,
)


router = APIRouter()


@router.get('/owner/{owner}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_user_tickets(
    owner: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> UserTicketsResponse:
    """Always empty: the ledger keeps no owner index."""
    return UserTicketsResponse(owner=owner, ticket_ids=use_case.get_user_tickets(owner=owner))


@router.get('/{ticket_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    ticket_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = use_case.get_ticket(ticket_id=ticket_id)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f'Ticket not found: {ticket_id}')
    ticket_status = use_case.get_ticket_status(ticket_id=ticket_id)
    return TicketResponse(**attrs.asdict(ticket), status=ticket_status)


@router.get('/{ticket_id}/validity', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket_validity(
    ticket_id: str,
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketValidityResponse:
    is_valid = use_case.is_ticket_valid(ticket_id=ticket_id)
    return TicketValidityResponse(ticket_id=ticket_id, is_valid=is_valid)


@router.post('/{ticket_id}/transfer', status_code=status.HTTP_200_OK)
@Logger.io
async def transfer_ticket(
    ticket_id: str,
    request: TicketTransferRequest,
    caller_id: str = Depends(get_caller_id),
    use_case: TransferTicketUseCase = Depends(TransferTicketUseCase.depends),
) -> SuccessResponse:
    success = use_case.execute(
        caller=caller_id,
        ticket_id=ticket_id,
        from_owner=request.from_owner,
        to_owner=request.to_owner,
    )
    return SuccessResponse(success=success)


@router.post('/{ticket_id}/use', status_code=status.HTTP_200_OK)
@Logger.io
async def use_ticket(
    ticket_id: str,
    caller_id: str = Depends(get_caller_id),
    use_case: UseTicketUseCase = Depends(UseTicketUseCase.depends),
) -> SuccessResponse:
    success = use_case.execute(caller=caller_id, ticket_id=ticket_id)
    return SuccessResponse(success=success)
