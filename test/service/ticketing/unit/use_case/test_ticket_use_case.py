"""
Unit tests for TransferTicketUseCase / UseTicketUseCase / GetTicketUseCase

Focus:
1. Transfer authorization is checked against from_owner (strict mode adds caller)
2. Check-in is admin only and happens once
3. Used tickets and cancelled events freeze ownership
"""

import attrs
import pytest

from src.platform.exception.exceptions import (
    EventCancelledError,
    NotFoundError,
    NotOwnerError,
    TicketRefundedError,
    TicketUsedError,
    UnauthorizedError,
)
from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.driven_adapter.state.ledger_codec import encode_document, ticket_to_dict
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import make_tickets_key
from test.service.ticketing.unit.helpers import ADMIN, BUYER, FRIEND, STRANGER


@pytest.fixture
def minted(ledger):
    """(event_id, ticket_id) for one ticket owned by BUYER."""
    event_id = ledger.bootstrap_event(total_tickets=5)
    ticket_id = ledger.mint_ticket.mint_ticket(caller=BUYER, event_id=event_id, buyer=BUYER)
    return event_id, ticket_id


def _mark_refunded(ledger, ticket_id: str) -> None:
    # No operation sets is_refunded, so write it straight into the store
    ticket = ledger.get_ticket.get_ticket(ticket_id=ticket_id)
    ledger.store.commit(
        {
            make_tickets_key(): encode_document(
                {ticket_id: ticket_to_dict(attrs.evolve(ticket, is_refunded=True))}
            )
        }
    )


class TestTransferTicket:
    def test_owner_transfers_ticket(self, ledger, minted):
        _, ticket_id = minted

        result = ledger.transfer_ticket.execute(
            caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
        )

        assert result is True
        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id).owner == FRIEND
        assert ledger.published_types()[-1] == LedgerChangeType.TICKET_TRANSFERRED

    def test_round_trip_restores_owner(self, ledger, minted):
        _, ticket_id = minted
        original = ledger.get_ticket.get_ticket(ticket_id=ticket_id)

        ledger.transfer_ticket.execute(
            caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
        )
        ledger.transfer_ticket.execute(
            caller=FRIEND, ticket_id=ticket_id, from_owner=FRIEND, to_owner=BUYER
        )

        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id) == original

    def test_wrong_from_owner_fails(self, ledger, minted):
        _, ticket_id = minted
        before = ledger.snapshot()

        with pytest.raises(NotOwnerError):
            ledger.transfer_ticket.execute(
                caller=STRANGER, ticket_id=ticket_id, from_owner=STRANGER, to_owner=STRANGER
            )

        assert ledger.snapshot() == before

    def test_any_caller_with_matching_from_owner_can_transfer(self, ledger, minted):
        _, ticket_id = minted

        ledger.transfer_ticket.execute(
            caller=STRANGER, ticket_id=ticket_id, from_owner=BUYER, to_owner=STRANGER
        )

        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id).owner == STRANGER

    def test_strict_mode_requires_caller_to_be_from_owner(self, strict_ledger):
        event_id = strict_ledger.bootstrap_event()
        ticket_id = strict_ledger.mint_ticket.mint_ticket(
            caller=BUYER, event_id=event_id, buyer=BUYER
        )

        with pytest.raises(NotOwnerError):
            strict_ledger.transfer_ticket.execute(
                caller=STRANGER, ticket_id=ticket_id, from_owner=BUYER, to_owner=STRANGER
            )

        strict_ledger.transfer_ticket.execute(
            caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
        )
        assert strict_ledger.get_ticket.get_ticket(ticket_id=ticket_id).owner == FRIEND

    def test_unknown_ticket_fails(self, ledger, minted):
        with pytest.raises(NotFoundError):
            ledger.transfer_ticket.execute(
                caller=BUYER, ticket_id='ticket-99', from_owner=BUYER, to_owner=FRIEND
            )

    def test_used_ticket_cannot_move(self, ledger, minted):
        _, ticket_id = minted
        ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)

        with pytest.raises(TicketUsedError):
            ledger.transfer_ticket.execute(
                caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
            )

    def test_refunded_ticket_cannot_move(self, ledger, minted):
        _, ticket_id = minted
        _mark_refunded(ledger, ticket_id)

        with pytest.raises(TicketRefundedError):
            ledger.transfer_ticket.execute(
                caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
            )

    def test_cancelled_event_freezes_ticket(self, ledger, minted):
        event_id, ticket_id = minted
        ledger.cancel_event.execute(caller=ADMIN, event_id=event_id)

        with pytest.raises(EventCancelledError):
            ledger.transfer_ticket.execute(
                caller=BUYER, ticket_id=ticket_id, from_owner=BUYER, to_owner=FRIEND
            )
        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id).owner == BUYER


class TestUseTicket:
    def test_admin_checks_in_once(self, ledger, minted):
        _, ticket_id = minted

        assert ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id) is True
        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id).is_used is True
        assert ledger.published_types()[-1] == LedgerChangeType.TICKET_USED

        with pytest.raises(TicketUsedError):
            ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)

    def test_non_admin_cannot_check_in(self, ledger, minted):
        _, ticket_id = minted

        with pytest.raises(UnauthorizedError):
            ledger.use_ticket.execute(caller=BUYER, ticket_id=ticket_id)

        assert ledger.get_ticket.get_ticket(ticket_id=ticket_id).is_used is False

    def test_unknown_ticket_fails(self, ledger, minted):
        with pytest.raises(NotFoundError):
            ledger.use_ticket.execute(caller=ADMIN, ticket_id='ticket-99')

    def test_refunded_ticket_cannot_check_in(self, ledger, minted):
        _, ticket_id = minted
        _mark_refunded(ledger, ticket_id)

        with pytest.raises(TicketRefundedError):
            ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)

    def test_cancelled_event_blocks_check_in(self, ledger, minted):
        event_id, ticket_id = minted
        ledger.cancel_event.execute(caller=ADMIN, event_id=event_id)

        with pytest.raises(EventCancelledError):
            ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)


class TestTicketQueries:
    def test_get_ticket_unknown_returns_none(self, ledger, minted):
        assert ledger.get_ticket.get_ticket(ticket_id='ticket-99') is None

    def test_fresh_ticket_is_valid(self, ledger, minted):
        _, ticket_id = minted

        assert ledger.get_ticket.is_ticket_valid(ticket_id=ticket_id) is True

    def test_used_ticket_is_not_valid(self, ledger, minted):
        _, ticket_id = minted
        ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)

        assert ledger.get_ticket.is_ticket_valid(ticket_id=ticket_id) is False

    def test_validity_of_unknown_ticket_fails(self, ledger, minted):
        with pytest.raises(NotFoundError):
            ledger.get_ticket.is_ticket_valid(ticket_id='ticket-99')

    def test_status_follows_ticket_and_event(self, ledger, minted):
        event_id, ticket_id = minted
        assert ledger.get_ticket.get_ticket_status(ticket_id=ticket_id) == TicketStatus.VALID

        ledger.cancel_event.execute(caller=ADMIN, event_id=event_id)

        assert ledger.get_ticket.get_ticket_status(ticket_id=ticket_id) == TicketStatus.CANCELLED

    def test_used_ticket_status(self, ledger, minted):
        _, ticket_id = minted
        ledger.use_ticket.execute(caller=ADMIN, ticket_id=ticket_id)

        assert ledger.get_ticket.get_ticket_status(ticket_id=ticket_id) == TicketStatus.USED

    def test_status_of_unknown_ticket_fails(self, ledger, minted):
        with pytest.raises(NotFoundError):
            ledger.get_ticket.get_ticket_status(ticket_id='ticket-99')

    def test_user_tickets_is_always_empty(self, ledger, minted):
        assert ledger.get_ticket.get_user_tickets(owner=BUYER) == []
        assert ledger.get_ticket.get_user_tickets(owner=STRANGER) == []
