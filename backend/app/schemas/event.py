from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, Literal
from datetime import datetime

class EventCreate(BaseModel):
    title: str
    description: Optional[str] = None
    event_date: datetime
    visibility: Literal["shared", "private"] = "shared"

    @field_validator('title', mode='before')
    @classmethod
    def strip_title(cls, v):
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

    @field_validator('description', mode='before')
    @classmethod
    def empty_description_to_none(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v.strip()

class EventResponse(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    event_date: datetime
    created_by: int
    visibility: str
    approved: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
