"""
Kvrocks Ledger Store

Storage Format:
    Key: <prefix>eventx:{admin|events|tickets|roster|counter}
    Type: String (orjson document)

Commit runs every SET inside one MULTI/EXEC so a failed operation never
leaves some slots updated and others stale.
"""

from typing import Mapping, Optional

from opentelemetry import trace
from redis import Redis

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ledger_store import ILedgerStore


class KvrocksLedgerStore(ILedgerStore):
    def __init__(self, *, client: Redis) -> None:
        self.client = client
        self.tracer = trace.get_tracer(__name__)

    def get(self, key: str) -> Optional[bytes]:
        return self.client.get(key)  # type: ignore[return-value]

    def exists(self, key: str) -> bool:
        return bool(self.client.exists(key))

    @Logger.io(truncate_content=True)
    def commit(self, writes: Mapping[str, bytes]) -> None:
        if not writes:
            return
        with self.tracer.start_as_current_span(
            'ledger_store.commit',
            attributes={
                'cache.system': 'kvrocks',
                'cache.operation': 'multi_exec',
                'ledger.keys': len(writes),
            },
        ):
            with self.client.pipeline(transaction=True) as pipe:
                for key, value in writes.items():
                    pipe.set(key, value)
                pipe.execute()

    def delete(self, *keys: str) -> int:
        if not keys:
            return 0
        return int(self.client.delete(*keys))  # type: ignore[arg-type]
