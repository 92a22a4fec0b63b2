from typing import Protocol


class IClock(Protocol):
    """Wall-clock source the ledger cannot fabricate."""

    def now(self) -> int:
        """Current time in unix-epoch seconds."""
        ...
