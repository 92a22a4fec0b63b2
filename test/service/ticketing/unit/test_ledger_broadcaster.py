"""
Unit tests for LedgerBroadcaster

Tests the in-memory pub/sub used to push committed ledger
changes to SSE endpoints and refund observers.
"""

from anyio import WouldBlock, fail_after
from anyio.streams.memory import MemoryObjectReceiveStream
from prometheus_client import REGISTRY
import pytest

from src.platform.event.ledger_broadcaster import LedgerBroadcaster
from src.service.ticketing.domain.domain_event.ledger_change_event import LedgerChangeEvent
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


@pytest.fixture
def broadcaster() -> LedgerBroadcaster:
    return LedgerBroadcaster(buffer_size=2)


@pytest.fixture
def change() -> LedgerChangeEvent:
    return LedgerChangeEvent(
        event_type=LedgerChangeType.EVENT_CANCELLED,
        payload={'event_id': 'event-0', 'tickets_sold': 3},
    )


class TestLedgerBroadcaster:
    def test_subscribe_returns_stream(self, broadcaster):
        stream = broadcaster.subscribe()

        assert isinstance(stream, MemoryObjectReceiveStream)
        assert broadcaster.subscriber_count == 1

    def test_publish_without_subscribers_is_silent(self, broadcaster, change):
        broadcaster.publish(change=change)

    @pytest.mark.asyncio
    async def test_publish_reaches_every_subscriber(self, broadcaster, change):
        stream1 = broadcaster.subscribe()
        stream2 = broadcaster.subscribe()

        broadcaster.publish(change=change)

        with fail_after(1.0):
            received1 = await stream1.receive()
            received2 = await stream2.receive()
        assert received1 == received2 == change.to_dict()
        assert received1['event_type'] == 'event_cancelled'
        assert received1['payload'] == {'event_id': 'event-0', 'tickets_sold': 3}

    def test_full_subscriber_drops_instead_of_blocking(self, broadcaster, change):
        stream = broadcaster.subscribe()

        for _ in range(5):
            broadcaster.publish(change=change)

        received = []
        while True:
            try:
                received.append(stream.receive_nowait())
            except WouldBlock:
                break
        assert len(received) == 2

    @pytest.mark.asyncio
    async def test_unsubscribe_closes_and_forgets_stream(self, broadcaster, change):
        stream = broadcaster.subscribe()

        await broadcaster.unsubscribe(stream=stream)

        assert broadcaster.subscriber_count == 0
        broadcaster.publish(change=change)

    def test_closed_subscriber_is_forgotten_on_publish(self, broadcaster, change):
        live = broadcaster.subscribe()
        closed = broadcaster.subscribe()
        closed.close()

        broadcaster.publish(change=change)

        assert broadcaster.subscriber_count == 1
        assert REGISTRY.get_sample_value('ledger_broadcast_subscribers') == 1
        assert live.receive_nowait() == change.to_dict()

    @pytest.mark.asyncio
    async def test_unsubscribe_unknown_stream_is_ignored(self, broadcaster):
        kept = broadcaster.subscribe()
        other = LedgerBroadcaster().subscribe()

        await broadcaster.unsubscribe(stream=other)

        assert broadcaster.subscriber_count == 1
        await broadcaster.unsubscribe(stream=kept)
