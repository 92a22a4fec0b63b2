from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.platform.state.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.app.interface.i_ledger_broadcaster import ILedgerBroadcaster
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


class InitializeLedgerUseCase:
    """
    Bootstrap (or reset) the ledger.

    Writes admin, empty event map, empty ticket map, counter 0 and an empty
    roster in one commit. Calling it again is allowed and wipes all state.
    """

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
    def execute(self, *, admin: str) -> str:
        with metrics.track_operation('initialize'):
            with self.uow:
                self.uow.registry.bootstrap(admin=admin)
                self.uow.commit()

        Logger.base.info(f'🏁 [INITIALIZE] Ledger initialized with admin {admin}')
        self.broadcaster.publish(
            change=LedgerChangeEvent(
                event_type=LedgerChangeType.LEDGER_INITIALIZED, payload={'admin': admin}
            )
        )
        return admin
