from collections.abc import AsyncIterator

import anyio
from fastapi import APIRouter, status
import orjson
from sse_starlette.sse import EventSourceResponse

from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger


router = APIRouter()


@router.get('/stream', status_code=status.HTTP_200_OK)
@Logger.io
async def stream_ledger_changes() -> EventSourceResponse:
    """
    SSE stream of committed ledger changes

    Architecture: Use Case → commit → LedgerBroadcaster → SSE Endpoint → Client

    Every change (event_created, ticket_minted, event_cancelled, ...) is sent
    as one SSE message whose event name is the change type.
    """
    broadcaster = container.ledger_broadcaster()
    receive_stream = broadcaster.subscribe()
    Logger.base.info('📡 [SSE] Client subscribed to ledger changes')

    async def event_generator() -> AsyncIterator[dict[str, str]]:
        try:
            async for change in receive_stream:
                yield {'event': change['event_type'], 'data': orjson.dumps(change).decode()}
        except anyio.get_cancelled_exc_class():
            Logger.base.info('🔌 [SSE] Client disconnected from ledger changes')
            raise
        finally:
            await broadcaster.unsubscribe(stream=receive_stream)

    return EventSourceResponse(event_generator())
