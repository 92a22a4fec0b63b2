"""
Ledger Broadcaster Interface

Post-commit fan-out of ledger changes to in-process subscribers
(SSE endpoint, refund observers).
"""

from typing import Protocol

from anyio.streams.memory import MemoryObjectReceiveStream

from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent


class ILedgerBroadcaster(Protocol):
    def subscribe(self) -> MemoryObjectReceiveStream[dict]:
        ...

    def publish(self, *, change: LedgerChangeEvent) -> None:
        """
        Deliver change to every subscriber without blocking.

        Note:
            - Drops the change for subscribers whose buffer is full
            - Never raises into the publishing use case
        """
        ...

    async def unsubscribe(self, *, stream: MemoryObjectReceiveStream[dict]) -> None:
        ...
