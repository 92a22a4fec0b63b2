"""
Production FastAPI Application

EventX ledger service: admin, event and ticket operations over HTTP,
plus an SSE stream of committed changes.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.core_setting import settings
from src.platform.config.di import container, setup
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig
from src.platform.state.kvrocks_client import kvrocks_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Ledger Service] Starting up...')

    tracing = TracingConfig(service_name='eventx-ledger')
    tracing.setup()
    Logger.base.info('📊 [Ledger Service] OpenTelemetry tracing configured')

    container.wire(modules=WIRE_MODULES)
    setup()
    Logger.base.info('🔌 [Ledger Service] Dependency injection wired')

    if settings.LEDGER_STORE_BACKEND == 'kvrocks':
        tracing.instrument_redis()
        # Fail-fast
        kvrocks_client.initialize()
        Logger.base.info('📡 [Ledger Service] Kvrocks ledger store ready')
    else:
        Logger.base.warning('⚠️ [Ledger Service] In-memory ledger store, state is lost on restart')

    Logger.base.info('✅ [Ledger Service] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Ledger Service] Shutting down...')

    kvrocks_client.disconnect()

    tracing.shutdown()
    Logger.base.info('📊 [Ledger Service] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Ledger Service] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
