from fastapi import Header


def get_caller_id(x_caller_id: str = Header(..., alias='X-Caller-Id')) -> str:
    """
    Caller identity as asserted by the upstream gateway.

    The gateway authenticates the request; this service trusts the header.
    """
    return x_caller_id
