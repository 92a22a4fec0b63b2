from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventRepo(ABC):
    @abstractmethod
    def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    def get_many(self, *, event_ids: List[str]) -> List[EventEntity]:
        """Resolve ids in order, silently skipping unknown ones."""
        pass

    @abstractmethod
    def save(self, *, event: EventEntity) -> EventEntity:
        pass
