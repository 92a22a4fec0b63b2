from contextlib import contextmanager
import time
from typing import Iterator

from prometheus_client import Counter, Gauge, Histogram

from src.platform.exception.exceptions import CustomBaseError


class LedgerMetrics:
    """Prometheus collectors for ledger operations."""

    def __init__(self) -> None:
        self.ledger_operations = Counter(
            'ledger_operations_total',
            'Ledger operations by outcome',
            ['operation', 'result'],  # result: ok or the error code
        )

        self.ledger_operation_duration = Histogram(
            'ledger_operation_duration_seconds',
            'Ledger operation processing time',
            ['operation'],
            buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        self.tickets_minted = Counter(
            'ledger_tickets_minted_total', 'Tickets minted', ['event_id']
        )

        self.events_cancelled = Counter('ledger_events_cancelled_total', 'Events cancelled')

        self.broadcast_subscribers = Gauge(
            'ledger_broadcast_subscribers', 'Active change notification subscribers'
        )

    def record_operation(self, *, operation: str, result: str, duration: float) -> None:
        self.ledger_operations.labels(operation=operation, result=result).inc()
        self.ledger_operation_duration.labels(operation=operation).observe(duration)

    def record_ticket_minted(self, *, event_id: str) -> None:
        self.tickets_minted.labels(event_id=event_id).inc()

    def record_event_cancelled(self) -> None:
        self.events_cancelled.inc()

    @contextmanager
    def track_operation(self, operation: str) -> Iterator[None]:
        """Record outcome and duration of one ledger operation, re-raising any error."""
        start_time = time.time()
        result = 'ok'
        try:
            yield
        except CustomBaseError as e:
            result = e.code
            raise
        except Exception:
            result = 'error'
            raise
        finally:
            self.record_operation(
                operation=operation, result=result, duration=time.time() - start_time
            )


# Global metrics instance
metrics = LedgerMetrics()
