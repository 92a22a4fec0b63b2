from typing import TYPE_CHECKING, List

from src.service.ticketing.app.interface.i_ledger_registry_repo import ILedgerRegistryRepo
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import (
    make_admin_key,
    make_counter_key,
    make_events_key,
    make_roster_key,
    make_tickets_key,
)


if TYPE_CHECKING:
    from src.platform.state.unit_of_work import LedgerSession


class LedgerRegistryRepoImpl(ILedgerRegistryRepo):
    def __init__(self, *, session: 'LedgerSession') -> None:
        self.session = session

    def bootstrap(self, *, admin: str) -> None:
        self.session.stage(make_admin_key(), admin)
        self.session.stage(make_events_key(), {})
        self.session.stage(make_tickets_key(), {})
        self.session.stage(make_counter_key(), 0)
        self.session.stage(make_roster_key(), [])

    def get_admin(self) -> str:
        return self.session.read(make_admin_key())

    def set_admin(self, *, admin: str) -> None:
        # Reading first keeps set_admin on an empty store a NotInitialized failure
        self.session.read(make_admin_key())
        self.session.stage(make_admin_key(), admin)

    def next_id(self, *, kind: str) -> str:
        counter = int(self.session.read(make_counter_key()))
        self.session.stage(make_counter_key(), counter + 1)
        return f'{kind}-{counter}'

    def get_roster(self) -> List[str]:
        return list(self.session.read(make_roster_key()))

    def append_to_roster(self, *, event_id: str) -> None:
        self.session.stage(make_roster_key(), [*self.get_roster(), event_id])
