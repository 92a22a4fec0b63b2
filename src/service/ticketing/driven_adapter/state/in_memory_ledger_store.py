from typing import Dict, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ledger_store import ILedgerStore


class InMemoryLedgerStore(ILedgerStore):
    """Process-local store for tests and single-node development."""

    def __init__(self) -> None:
        self._data: Dict[str, bytes] = {}

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def exists(self, key: str) -> bool:
        return key in self._data

    @Logger.io(truncate_content=True)
    def commit(self, writes: Mapping[str, bytes]) -> None:
        # A single dict.update cannot be observed half-applied by a serialized caller
        self._data.update(writes)

    def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self._data.pop(key, None) is not None:
                removed += 1
        return removed
