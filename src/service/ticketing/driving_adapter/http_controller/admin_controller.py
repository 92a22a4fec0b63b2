from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.initialize_ledger_use_case import InitializeLedgerUseCase
from src.service.ticketing.app.command.set_admin_use_case import SetAdminUseCase
from src.service.ticketing.app.query.get_admin_use_case import GetAdminUseCase
from src.service.ticketing.driving_adapter.http_controller.auth.caller_identity import (
    get_caller_id,
)
from src.service.ticketing.driving_adapter.schema.admin_schema import (
    AdminResponse,
    InitializeLedgerRequest,
    SetAdminRequest,
    SuccessResponse,
)


router = APIRouter()


@router.post('/initialize', status_code=status.HTTP_201_CREATED)
@Logger.io
async def initialize_ledger(
    request: InitializeLedgerRequest,
    use_case: InitializeLedgerUseCase = Depends(InitializeLedgerUseCase.depends),
) -> AdminResponse:
    """Bootstrap the ledger. Calling it again resets every event and ticket."""
    admin = use_case.execute(admin=request.admin)
    return AdminResponse(admin=admin)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_admin(
    use_case: GetAdminUseCase = Depends(GetAdminUseCase.depends),
) -> AdminResponse:
    return AdminResponse(admin=use_case.execute())


@router.put('', status_code=status.HTTP_200_OK)
@Logger.io
async def set_admin(
    request: SetAdminRequest,
    caller_id: str = Depends(get_caller_id),
    use_case: SetAdminUseCase = Depends(SetAdminUseCase.depends),
) -> SuccessResponse:
    success = use_case.execute(caller=caller_id, new_admin=request.new_admin)
    return SuccessResponse(success=success)
