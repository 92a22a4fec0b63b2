from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.app.service.admin_gate import require_admin
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class SetAdminUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork, broadcaster: ILedgerBroadcaster) -> None:
        self.uow = uow
        self.broadcaster = broadcaster

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow]),
        broadcaster: ILedgerBroadcaster = Depends(Provide[Container.ledger_broadcaster]),
    ) -> Self:
        return cls(uow=uow, broadcaster=broadcaster)

    @Logger.io
    def execute(self, *, caller: str, new_admin: str) -> bool:
        """
        Hand the admin role to new_admin. Only the current admin may do this.

        Raises:
            NotInitializedError: ledger was never initialized
            UnauthorizedError: caller is not the current admin
        """
        with metrics.track_operation('set_admin'):
            with self.uow:
                require_admin(registry=self.uow.registry, caller=caller)
                self.uow.registry.set_admin(admin=new_admin)
                self.uow.commit()

        Logger.base.info(f'🔑 [SET_ADMIN] Admin changed from {caller} to {new_admin}')
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.ADMIN_CHANGED,
                payload={'previous_admin': caller, 'admin': new_admin},
            )
        )
        return True
