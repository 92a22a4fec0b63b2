#!/usr/bin/env python3
"""
Ledger Seed Script
Populate demo data into the configured ledger store

Features:
1. Initialize Ledger - set the admin (wipes any existing ledger state)
2. Create Event - one demo event created by the admin
3. Mint Ticket - one ticket for the demo buyer

Notes:
- Uses LEDGER_STORE_BACKEND from settings (memory is pointless here, use kvrocks)
- Identities can be overridden with SEED_ADMIN / SEED_BUYER
"""

import os

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.initialize_ledger_use_case import InitializeLedgerUseCase
from src.service.ticketing.app.command.mint_ticket_use_case import MintTicketUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase


ADMIN = os.getenv('SEED_ADMIN', 'admin-wallet')
BUYER = os.getenv('SEED_BUYER', 'buyer-wallet')
TOTAL_TICKETS = int(os.getenv('SEED_TOTAL_TICKETS', '100'))


def _initialize_kvrocks() -> None:
    if settings.LEDGER_STORE_BACKEND != 'kvrocks':
        print('⚠️  LEDGER_STORE_BACKEND is not kvrocks, seeded data lives only in this process')
        return
    try:
        kvrocks_client.initialize()
        print('📡 Kvrocks connection pool initialized')
    except Exception as e:
        print(f'❌ Failed to initialize Kvrocks: {e}')
        raise


def seed() -> None:
    broadcaster = container.ledger_broadcaster()
    clock = container.clock()

    InitializeLedgerUseCase(uow=container.ledger_uow(), broadcaster=broadcaster).execute(
        admin=ADMIN
    )
    print(f'   ✅ Ledger initialized, admin={ADMIN}')

    event_id = CreateEventUseCase(
        uow=container.ledger_uow(), broadcaster=broadcaster
    ).create_event(
        caller=ADMIN,
        title='Concert Event',
        description='Amazing live music performance',
        total_tickets=TOTAL_TICKETS,
        ticket_price=1000,
        event_date=clock.now() + 30 * 86_400,
    )
    print(f'   ✅ Created event: ID={event_id}, tickets={TOTAL_TICKETS}')

    ticket_id = MintTicketUseCase(
        uow=container.ledger_uow(), clock=clock, broadcaster=broadcaster
    ).mint_ticket(caller=BUYER, event_id=event_id, buyer=BUYER)
    print(f'   ✅ Minted ticket: ID={ticket_id}, owner={BUYER}')


def verify_data() -> None:
    print('🔍 Verifying seeded data...')
    for event in GetEventUseCase(uow=container.ledger_uow()).get_all_events():
        print(
            f'      Event ID={event.id}, Title={event.title}, '
            f'Sold={event.tickets_sold}/{event.total_tickets}'
        )
    print('   ✅ Data verification completed!')


def main() -> None:
    print('🌱 Starting ledger seeding...')
    print('=' * 50)

    try:
        _initialize_kvrocks()
        seed()
        verify_data()

        print()
        print('=' * 50)
        print('🌱 Ledger seeding completed!')
        print(f'📋 Admin: {ADMIN}  Buyer: {BUYER}')
    finally:
        kvrocks_client.disconnect()


if __name__ == '__main__':
    main()
