"""
Test Configuration and Fixtures

This module provides:
- Environment setup that must happen before application imports
- An in-memory ledger store per test
- A TestClient wired against that store for API tests

Architecture:
- Unit tests build use cases directly (see test/service/ticketing/unit/helpers.py)
- API tests go through the real app, DI container and exception handlers
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings and key_str_generator read these at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    if worker_id == 'master':
        os.environ['KVROCKS_KEY_PREFIX'] = 'test_'
    else:
        os.environ['KVROCKS_KEY_PREFIX'] = f'test_{worker_id}_'

    os.environ['LEDGER_STORE_BACKEND'] = 'memory'
    os.environ.setdefault('STRICT_TRANSFER_AUTH', 'false')

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.ticketing.driven_adapter.state.in_memory_ledger_store import (  # noqa: E402
    InMemoryLedgerStore,
)
from test.test_main import app  # noqa: E402


@pytest.fixture
def ledger_store() -> InMemoryLedgerStore:
    return InMemoryLedgerStore()


@pytest.fixture
def client(ledger_store: InMemoryLedgerStore) -> Generator[TestClient, None, None]:
    """TestClient whose DI container points at a fresh in-memory store."""
    with container.ledger_store.override(ledger_store):
        with TestClient(app) as test_client:
            yield test_client
