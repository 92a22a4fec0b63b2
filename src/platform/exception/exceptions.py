class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    code: str = 'ERROR'

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    code = 'DOMAIN_ERROR'

    def __init__(self, message: str, status_code: int = 409) -> None:
        super().__init__(message, status_code)


class ForbiddenError(CustomBaseError):
    code = 'FORBIDDEN'

    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    code = 'NOT_FOUND'

    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


# ============================ Ledger errors ============================


class NotInitializedError(DomainError):
    code = 'NOT_INITIALIZED'

    def __init__(self, message: str = 'Ledger is not initialized') -> None:
        super().__init__(message)


class UnauthorizedError(ForbiddenError):
    code = 'UNAUTHORIZED'

    def __init__(self, message: str = 'Only the admin can perform this action') -> None:
        super().__init__(message)


class NotOwnerError(ForbiddenError):
    code = 'NOT_OWNER'

    def __init__(self, message: str = 'Caller is not the ticket owner') -> None:
        super().__init__(message)


class EventNotActiveError(DomainError):
    code = 'EVENT_NOT_ACTIVE'

    def __init__(self, message: str = 'Event is not active or has been cancelled') -> None:
        super().__init__(message)


class SoldOutError(DomainError):
    code = 'SOLD_OUT'

    def __init__(self, message: str = 'All tickets for this event are sold') -> None:
        super().__init__(message)


class AlreadyCancelledError(DomainError):
    code = 'ALREADY_CANCELLED'

    def __init__(self, message: str = 'Event is already cancelled') -> None:
        super().__init__(message)


class TicketUsedError(DomainError):
    code = 'TICKET_USED'

    def __init__(self, message: str = 'Ticket has already been used') -> None:
        super().__init__(message)


class TicketRefundedError(DomainError):
    code = 'TICKET_REFUNDED'

    def __init__(self, message: str = 'Ticket has been refunded') -> None:
        super().__init__(message)


class EventCancelledError(DomainError):
    code = 'EVENT_CANCELLED'

    def __init__(self, message: str = 'Event of this ticket has been cancelled') -> None:
        super().__init__(message)
