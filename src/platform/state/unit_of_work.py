"""
Unit of Work Pattern - one atomic commit per ledger operation

Architecture:
- LedgerSession buffers every staged slot document and serves reads from the
  buffer first (read-your-writes within one operation)
- Repositories read and stage through the shared session
- commit() flushes the whole buffer with a single ILedgerStore.commit call
- Leaving the context without commit discards the buffer
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Dict

from src.platform.exception.exceptions import NotInitializedError
from src.service.ticketing.driven_adapter.state.ledger_codec import (
    decode_document,
    encode_document,
)


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_event_repo import IEventRepo
    from src.service.ticketing.app.interface.i_ledger_registry_repo import ILedgerRegistryRepo
    from src.service.ticketing.app.interface.i_ledger_store import ILedgerStore
    from src.service.ticketing.app.interface.i_ticket_repo import ITicketRepo


class LedgerSession:
    def __init__(self, store: ILedgerStore) -> None:
        self.store = store
        self._loaded: Dict[str, Any] = {}
        self._staged: Dict[str, Any] = {}

    def read(self, key: str) -> Any:
        """
        Decoded document for key.

        Raises:
            NotInitializedError: slot was never written (ledger not bootstrapped)
        """
        if key in self._staged:
            return self._staged[key]
        if key not in self._loaded:
            raw = self.store.get(key)
            if raw is None:
                raise NotInitializedError()
            self._loaded[key] = decode_document(raw)
        return self._loaded[key]

    def stage(self, key: str, document: Any) -> None:
        self._staged[key] = document

    def flush(self) -> None:
        if not self._staged:
            return
        self.store.commit({key: encode_document(doc) for key, doc in self._staged.items()})
        self._loaded.update(self._staged)
        self._staged = {}

    def discard(self) -> None:
        self._staged = {}


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        with uow:
            event = uow.events.get_by_id(event_id=event_id)
            uow.events.save(event=event.cancel())
            uow.commit()
    """

    registry: ILedgerRegistryRepo
    events: IEventRepo
    tickets: ITicketRepo

    def __enter__(self) -> AbstractUnitOfWork:
        return self

    def __exit__(self, *args: Any) -> None:
        self.rollback()

    def commit(self) -> None:
        self._commit()

    @abc.abstractmethod
    def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError


class LedgerUnitOfWork(AbstractUnitOfWork):
    def __init__(self, store: ILedgerStore) -> None:
        self.store = store
        self.session = LedgerSession(store)

    def __enter__(self) -> AbstractUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.event_repo_impl import EventRepoImpl
        from src.service.ticketing.driven_adapter.repo.ledger_registry_repo_impl import (
            LedgerRegistryRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.ticket_repo_impl import TicketRepoImpl

        # Fresh buffer per operation, repositories share it
        self.session = LedgerSession(self.store)
        self.registry = LedgerRegistryRepoImpl(session=self.session)
        self.events = EventRepoImpl(session=self.session)
        self.tickets = TicketRepoImpl(session=self.session)

        return super().__enter__()

    def _commit(self) -> None:
        self.session.flush()

    def rollback(self) -> None:
        self.session.discard()
