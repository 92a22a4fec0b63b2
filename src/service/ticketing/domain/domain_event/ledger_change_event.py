from datetime import datetime, timezone
from typing import Any, Dict

import attrs

from src.service.ticketing.domain.enum.ledger_change_type import LedgerChangeType


@attrs.define(frozen=True)
class LedgerChangeEvent:
    """Post-commit notification for observers outside the ledger (refund workers, UIs)."""

    event_type: LedgerChangeType
    payload: Dict[str, Any]
    occurred_at: datetime = attrs.field(factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'event_type': self.event_type.value,
            'payload': self.payload,
            'occurred_at': self.occurred_at.isoformat(),
        }
