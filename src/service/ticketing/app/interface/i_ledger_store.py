"""
Ledger Store Interface

Port for the persistent key-value store behind the ledger.
The core only needs per-key reads and one all-or-nothing multi-key write.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional


class ILedgerStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the raw value stored under key, or None when the key is absent."""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def commit(self, writes: Mapping[str, bytes]) -> None:
        """
        Persist every write or none of them.

        Args:
            writes: key -> encoded value, applied as a single atomic batch
        """
        pass

    @abstractmethod
    def delete(self, *keys: str) -> int:
        """Remove keys, returns how many existed. Used by maintenance scripts only."""
        pass
