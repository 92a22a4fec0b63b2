"""Unit test fixtures for the ledger use cases."""

import pytest

from test.service.ticketing.unit.helpers import LedgerHarness


@pytest.fixture
def ledger(ledger_store) -> LedgerHarness:
    return LedgerHarness(store=ledger_store)


@pytest.fixture
def strict_ledger(ledger_store) -> LedgerHarness:
    return LedgerHarness(store=ledger_store, strict_transfer_auth=True)
