from src.platform.exception.exceptions import UnauthorizedError
from src.service.ticketing.app.interface.i_ledger_registry_repo import ILedgerRegistryRepo


def require_admin(*, registry: ILedgerRegistryRepo, caller: str) -> None:
    """
    Raises:
        NotInitializedError: no admin stored yet
        UnauthorizedError: caller is not the stored admin
    """
    if registry.get_admin() != caller:
        raise UnauthorizedError(f'{caller} is not the ledger admin')
