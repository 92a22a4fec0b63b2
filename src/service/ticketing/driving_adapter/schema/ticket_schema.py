from typing import List

from pydantic import BaseModel


class TicketResponse(BaseModel):
    id: str
    event_id: str
    owner: str
    purchase_date: int
    price: int
    is_used: bool
    is_refunded: bool
    status: str

    class Config:
        json_schema_extra = {
            'example': {
                'id': 'ticket-1',
                'event_id': 'event-0',
                'owner': 'buyer-wallet',
                'purchase_date': 1767225600,
                'price': 1000,
                'is_used': False,
                'is_refunded': False,
                'status': 'valid',
            }
        }


class TicketTransferRequest(BaseModel):
    from_owner: str
    to_owner: str

    class Config:
        json_schema_extra = {'example': {'from_owner': 'buyer-wallet', 'to_owner': 'friend-wallet'}}


class TicketValidityResponse(BaseModel):
    ticket_id: str
    is_valid: bool


class UserTicketsResponse(BaseModel):
    owner: str
    ticket_ids: List[str]
