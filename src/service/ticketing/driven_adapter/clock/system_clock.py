from datetime import datetime, timezone


class SystemClock:
    def now(self) -> int:
        return int(datetime.now(timezone.utc).timestamp())
