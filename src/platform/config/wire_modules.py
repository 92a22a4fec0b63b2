"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    cancel_event_use_case,
    create_event_use_case,
    initialize_ledger_use_case,
    mint_ticket_use_case,
    set_admin_use_case,
    transfer_ticket_use_case,
    use_ticket_use_case,
)
from src.service.ticketing.app.query import (
    get_admin_use_case,
    get_event_use_case,
    get_ticket_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    initialize_ledger_use_case,
    set_admin_use_case,
    create_event_use_case,
    cancel_event_use_case,
    mint_ticket_use_case,
    transfer_ticket_use_case,
    use_ticket_use_case,
    get_admin_use_case,
    get_event_use_case,
    get_ticket_use_case,
]
