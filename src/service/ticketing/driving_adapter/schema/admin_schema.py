from pydantic import BaseModel


class InitializeLedgerRequest(BaseModel):
    admin: str

    class Config:
        json_schema_extra = {'example': {'admin': 'admin-wallet'}}


class SetAdminRequest(BaseModel):
    new_admin: str

    class Config:
        json_schema_extra = {'example': {'new_admin': 'new-admin-wallet'}}


class AdminResponse(BaseModel):
    admin: str


class SuccessResponse(BaseModel):
    success: bool
