"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings, settings
from src.platform.event.ledger_broadcaster import LedgerBroadcaster
from src.platform.state.kvrocks_client import kvrocks_client
from src.platform.state.unit_of_work import LedgerUnitOfWork
from src.service.ticketing.driven_adapter.clock.system_clock import SystemClock
from src.service.ticketing.driven_adapter.state.in_memory_ledger_store import InMemoryLedgerStore
from src.service.ticketing.driven_adapter.state.kvrocks_ledger_store import KvrocksLedgerStore


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Ledger store, chosen by LEDGER_STORE_BACKEND (memory | kvrocks)
    ledger_store = providers.Selector(
        lambda: settings.LEDGER_STORE_BACKEND,
        memory=providers.Singleton(InMemoryLedgerStore),
        kvrocks=providers.Singleton(
            KvrocksLedgerStore,
            client=providers.Factory(kvrocks_client.get_client),
        ),
    )

    # One unit of work per operation
    ledger_uow = providers.Factory(LedgerUnitOfWork, store=ledger_store)

    clock = providers.Singleton(SystemClock)

    # Post-commit change notifications (SSE endpoint, refund observers)
    ledger_broadcaster = providers.Singleton(
        LedgerBroadcaster,
        buffer_size=config_service.provided.BROADCAST_BUFFER_SIZE,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.ledger_broadcaster()


def cleanup() -> None:
    container.reset_singletons()
