"""
In-memory Ledger Change Broadcaster

Singleton broadcaster fanning out committed ledger changes
from use cases to SSE endpoints and refund observers.
"""

from typing import List

from anyio import BrokenResourceError, WouldBlock, create_memory_object_stream
from anyio.streams.memory import MemoryObjectReceiveStream, MemoryObjectSendStream

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ledger_metrics import metrics
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent


class LedgerBroadcaster:
    """
    In-memory pub/sub for ledger change notifications

    Architecture:
    - Use Case → commit → publish() → SSE Endpoint / refund observer
    - Every subscriber receives every change (no topic filtering)
    - publish() is synchronous so the sync use cases can call it directly

    Memory Management:
    - Stream max buffer: buffer_size changes per subscriber
    - Drop policy: drop for that subscriber if its stream is full (WouldBlock)
    - Cleanup: unsubscribe closes both stream ends
    """

    def __init__(self, *, buffer_size: int = 100) -> None:
        self.buffer_size = buffer_size
        self._subscribers: List[
            tuple[MemoryObjectSendStream[dict], MemoryObjectReceiveStream[dict]]
        ] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> MemoryObjectReceiveStream[dict]:
        send_stream, receive_stream = create_memory_object_stream[dict](
            max_buffer_size=self.buffer_size
        )
        self._subscribers.append((send_stream, receive_stream))
        metrics.broadcast_subscribers.set(len(self._subscribers))

        Logger.base.debug(
            f'📡 [BROADCASTER] New subscriber (total subscribers: {len(self._subscribers)})'
        )
        return receive_stream

    def publish(self, *, change: LedgerChangeEvent) -> None:
        """
        Broadcast a committed change to all subscribers

        Note:
            - Non-blocking: drops the change for subscribers whose buffer is full
            - Silently ignores if no subscribers exist
        """
        if not self._subscribers:
            return

        event_data = change.to_dict()
        delivered = 0
        dropped = 0

        for subscriber in list(self._subscribers):
            send_stream = subscriber[0]
            try:
                send_stream.send_nowait(event_data)
                delivered += 1
            except WouldBlock:
                dropped += 1
                Logger.base.warning(
                    f'⚠️ [BROADCASTER] Stream full, dropping change (type={change.event_type})'
                )
            except BrokenResourceError:
                # Receiver closed without unsubscribing
                dropped += 1
                self._subscribers.remove(subscriber)
                metrics.broadcast_subscribers.set(len(self._subscribers))

        Logger.base.info(
            f'📡 [BROADCASTER] {change.event_type}: delivered={delivered}, dropped={dropped}'
        )

    async def unsubscribe(self, *, stream: MemoryObjectReceiveStream[dict]) -> None:
        """Remove subscriber and close its streams. Unknown streams are ignored."""
        for i, (send_stream, receive_stream) in enumerate(self._subscribers):
            if receive_stream is stream:
                await send_stream.aclose()
                await receive_stream.aclose()
                self._subscribers.pop(i)
                break

        metrics.broadcast_subscribers.set(len(self._subscribers))
        Logger.base.debug(f'📡 [BROADCASTER] Unsubscribed (remaining: {len(self._subscribers)})')
