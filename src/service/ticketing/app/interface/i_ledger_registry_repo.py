from abc import ABC, abstractmethod
from typing import List


class ILedgerRegistryRepo(ABC):
    """Admin identity, shared id counter and event-id roster."""

    @abstractmethod
    def bootstrap(self, *, admin: str) -> None:
        """Stage a fresh ledger: admin set, empty maps, counter 0, empty roster."""
        pass

    @abstractmethod
    def get_admin(self) -> str:
        pass

    @abstractmethod
    def set_admin(self, *, admin: str) -> None:
        pass

    @abstractmethod
    def next_id(self, *, kind: str) -> str:
        """Allocate `<kind>-<n>` from the shared counter (post-increment)."""
        pass

    @abstractmethod
    def get_roster(self) -> List[str]:
        pass

    @abstractmethod
    def append_to_roster(self, *, event_id: str) -> None:
        pass
