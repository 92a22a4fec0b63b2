from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketRepo(ABC):
    @abstractmethod
    def get_by_id(self, *, ticket_id: str) -> Optional[TicketEntity]:
        pass

    @abstractmethod
    def save(self, *, ticket: TicketEntity) -> TicketEntity:
        pass
