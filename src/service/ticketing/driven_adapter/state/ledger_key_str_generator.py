"""
Key String Generator

Helper functions for the five Kvrocks keys that hold the whole ledger.
"""

import os

from src.platform.config.core_setting import settings


def _get_key_prefix() -> str:
    """Read the prefix on every call, pytest sets KVROCKS_KEY_PREFIX after imports."""
    return os.getenv('KVROCKS_KEY_PREFIX', settings.KVROCKS_KEY_PREFIX)


def _make_key(key: str) -> str:
    return f'{_get_key_prefix()}eventx:{key}'


def make_admin_key() -> str:
    return _make_key('admin')


def make_events_key() -> str:
    return _make_key('events')


def make_tickets_key() -> str:
    return _make_key('tickets')


def make_roster_key() -> str:
    return _make_key('roster')


def make_counter_key() -> str:
    return _make_key('counter')


def make_all_ledger_keys() -> list[str]:
    return [
        make_admin_key(),
        make_events_key(),
        make_tickets_key(),
        make_roster_key(),
        make_counter_key(),
    ]
