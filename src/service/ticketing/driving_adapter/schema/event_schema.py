from pydantic import BaseModel, Field


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class EventCreateRequest(BaseModel):
    title: str
    description: str
    total_tickets: int = Field(ge=0, le=INT64_MAX)
    ticket_price: int = Field(ge=INT64_MIN, le=INT64_MAX)
    event_date: int = Field(ge=0, le=INT64_MAX)

    class Config:
        json_schema_extra = {
            'example': {
                'title': 'Concert Event',
                'description': 'Amazing live music performance',
                'total_tickets': 100,
                'ticket_price': 1000,
                'event_date': 1767225600,
            }
        }


class CreatedIdResponse(BaseModel):
    id: str


class EventResponse(BaseModel):
    id: str
    title: str
    description: str
    organizer: str
    total_tickets: int
    tickets_sold: int
    available_tickets: int
    ticket_price: int
    event_date: int
    is_active: bool
    is_cancelled: bool
    status: str

    class Config:
        json_schema_extra = {
            'example': {
                'id': 'event-0',
                'title': 'Concert Event',
                'description': 'Amazing live music performance',
                'organizer': 'admin-wallet',
                'total_tickets': 100,
                'tickets_sold': 1,
                'available_tickets': 99,
                'ticket_price': 1000,
                'event_date': 1767225600,
                'is_active': True,
                'is_cancelled': False,
                'status': 'active',
            }
        }


class EventTicketCountResponse(BaseModel):
    event_id: str
    tickets_sold: int


class MintTicketRequest(BaseModel):
    buyer: str

    class Config:
        json_schema_extra = {'example': {'buyer': 'buyer-wallet'}}
