from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

class AccessRequestCreate(BaseModel):
    name: str
    email: EmailStr
    reason: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v

    @field_validator('reason', mode='before')
    @classmethod
    def empty_reason_to_none(cls, v):
        # Convert empty string to None for optional reason field
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v.strip()

class AccessRequestResponse(BaseModel):
    id: int
    name: str
    email: str
    reason: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    reviewed_by: Optional[int] = None
    reviewed_at: Optional[datetime] = None
    version: int = 1

    model_config = ConfigDict(from_attributes=True)

class AccessDecisionResponse(BaseModel):
    message: str
    request: AccessRequestResponse
    # Only present on approval; relayed to the requester manually
    temp_password: Optional[str] = None
    provisioned_email: Optional[str] = None

class ProvisionRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None

class ProvisionResponse(BaseModel):
    success: bool
    message: str
    temp_password: str = Field(..., alias="tempPassword")

    model_config = ConfigDict(populate_by_name=True)

class CredentialReissueRequest(BaseModel):
    email: EmailStr
