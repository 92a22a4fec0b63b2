from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.state.unit_of_work import AbstractUnitOfWork


class GetAdminUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.ledger_uow])) -> Self:
        return cls(uow=uow)

    @Logger.io
    def execute(self) -> str:
        with self.uow:
            return self.uow.registry.get_admin()
