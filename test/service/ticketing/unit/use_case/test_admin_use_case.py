"""
Unit tests for InitializeLedgerUseCase / GetAdminUseCase / SetAdminUseCase

Focus:
1. Bootstrap writes every slot in one commit
2. Re-initialization is unguarded and wipes state
3. Admin rotation is gated on the current admin
"""

import pytest

from src.platform.exception.exceptions import NotInitializedError, UnauthorizedError
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import (
    make_all_ledger_keys,
)
from test.service.ticketing.unit.helpers import ADMIN, FRIEND, STRANGER


class TestInitializeLedger:
    def test_initialize_writes_all_slots(self, ledger):
        # Act
        result = ledger.initialize_ledger.execute(admin=ADMIN)

        # Assert
        assert result == ADMIN
        assert all(ledger.store.exists(key) for key in make_all_ledger_keys())
        assert ledger.get_admin.execute() == ADMIN
        assert ledger.get_event.get_all_events() == []
        assert ledger.published_types() == [LedgerChangeType.LEDGER_INITIALIZED]

    def test_reinitialize_resets_state(self, ledger):
        """
        Given: a ledger with one event and one sold ticket
        When: initialize is called again with a new admin
        Then: events, tickets and the counter start over
        """
        # Arrange
        event_id = ledger.bootstrap_event(total_tickets=5)
        ticket_id = ledger.mint_ticket.mint_ticket(caller=FRIEND, event_id=event_id, buyer=FRIEND)

        # Act
        ledger.initialize_ledger.execute(admin=FRIEND)

        # Assert
        assert ledger.get_admin.execute() == FRIEND
        assert ledger.get_event.get_event(event_id=event_id) is None
        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id) is None
        assert ledger.get_event.get_all_events() == []

        new_event_id = ledger.create_event.create_event(
            caller=FRIEND,
            title='Again',
            description='',
            total_tickets=1,
            ticket_price=0,
            event_date=0,
        )
        assert new_event_id == 'event-0'


class TestGetAdmin:
    def test_get_admin_before_initialize_fails(self, ledger):
        with pytest.raises(NotInitializedError):
            ledger.get_admin.execute()


class TestSetAdmin:
    def test_admin_can_hand_over_role(self, ledger):
        # Arrange
        ledger.initialize_ledger.execute(admin=ADMIN)

        # Act
        result = ledger.set_admin.execute(caller=ADMIN, new_admin=FRIEND)

        # Assert
        assert result is True
        assert ledger.get_admin.execute() == FRIEND
        assert ledger.published_types()[-1] == LedgerChangeType.ADMIN_CHANGED

        # Old admin lost the role
        with pytest.raises(UnauthorizedError):
            ledger.set_admin.execute(caller=ADMIN, new_admin=ADMIN)

    def test_non_admin_cannot_set_admin(self, ledger):
        ledger.initialize_ledger.execute(admin=ADMIN)
        before = ledger.snapshot()

        with pytest.raises(UnauthorizedError):
            ledger.set_admin.execute(caller=STRANGER, new_admin=STRANGER)

        assert ledger.snapshot() == before
        assert ledger.get_admin.execute() == ADMIN

    def test_set_admin_before_initialize_fails(self, ledger):
        with pytest.raises(NotInitializedError):
            ledger.set_admin.execute(caller=ADMIN, new_admin=FRIEND)
