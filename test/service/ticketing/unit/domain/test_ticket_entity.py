import attrs
import pytest

from src.platform.exception.exceptions import NotOwnerError, TicketRefundedError, TicketUsedError
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.ticket_status import TicketStatus


@pytest.fixture
def event() -> EventEntity:
    return EventEntity.create(
        id='event-0',
        title='Concert Event',
        description='Amazing live music performance',
        organizer='admin-wallet',
        total_tickets=10,
        ticket_price=1000,
        event_date=1_767_225_600,
    )


@pytest.fixture
def ticket() -> TicketEntity:
    return TicketEntity.create(
        id='ticket-1',
        event_id='event-0',
        owner='buyer-wallet',
        purchase_date=1_767_225_600,
        price=1000,
    )


class TestTicketEntity:
    def test_create_is_unused_and_unrefunded(self, ticket):
        assert ticket.is_used is False
        assert ticket.is_refunded is False
        assert ticket.price == 1000

    def test_transfer_checks_from_owner_first(self, ticket):
        used = ticket.mark_as_used()

        # Wrong owner wins over the used check
        with pytest.raises(NotOwnerError):
            used.validate_transfer(from_owner='stranger-wallet')

        with pytest.raises(TicketUsedError):
            used.validate_transfer(from_owner='buyer-wallet')

    def test_refunded_ticket_cannot_move_or_check_in(self, ticket):
        refunded = attrs.evolve(ticket, is_refunded=True)

        with pytest.raises(TicketRefundedError):
            refunded.validate_transfer(from_owner='buyer-wallet')
        with pytest.raises(TicketRefundedError):
            refunded.validate_check_in()

    def test_transfer_round_trip_keeps_flags(self, ticket):
        back = ticket.transfer_to(to_owner='friend-wallet').transfer_to(to_owner='buyer-wallet')

        assert back.owner == 'buyer-wallet'
        assert back.is_used is False
        assert back.is_refunded is False
        assert back.purchase_date == ticket.purchase_date

    def test_mark_as_used_twice_fails(self, ticket):
        used = ticket.mark_as_used()

        assert used.is_used is True
        with pytest.raises(TicketUsedError):
            used.mark_as_used()

    @pytest.mark.parametrize(
        'ticket_changes,cancel_event,expected_status,expected_valid',
        [
            ({}, False, TicketStatus.VALID, True),
            ({'is_used': True}, False, TicketStatus.USED, False),
            ({'is_refunded': True}, False, TicketStatus.REFUNDED, False),
            ({}, True, TicketStatus.CANCELLED, False),
        ],
    )
    def test_status_and_validity_against_event(
        self, ticket, event, ticket_changes, cancel_event, expected_status, expected_valid
    ):
        ticket = attrs.evolve(ticket, **ticket_changes)
        if cancel_event:
            event = event.cancel()

        assert ticket.status_for(event) == expected_status
        assert ticket.is_valid_for(event) is expected_valid
