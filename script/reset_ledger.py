#!/usr/bin/env python3
"""
Ledger Reset Script
Delete the five ledger slot keys from Kvrocks

Notes:
- Only keys under KVROCKS_KEY_PREFIX are touched
- Afterwards every operation fails with NOT_INITIALIZED until the ledger is initialized again
- To seed demo data, run `python script/seed_data.py`
"""

from src.platform.config.core_setting import settings
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.ticketing.driven_adapter.state.kvrocks_ledger_store import KvrocksLedgerStore
from src.service.ticketing.driven_adapter.state.ledger_key_str_generator import (
    make_all_ledger_keys,
)


def main() -> None:
    print('🧹 Resetting ledger...')
    print(f'   Kvrocks: {settings.KVROCKS_HOST}:{settings.KVROCKS_PORT}/{settings.KVROCKS_DB}')

    try:
        store = KvrocksLedgerStore(client=kvrocks_client.initialize())
        keys = make_all_ledger_keys()
        removed = store.delete(*keys)
        print(f'   ✅ Removed {removed}/{len(keys)} ledger keys')
    finally:
        kvrocks_client.disconnect()

    print('🧹 Ledger reset completed!')


if __name__ == '__main__':
    main()
