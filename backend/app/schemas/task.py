from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, Literal
from datetime import datetime

Priority = Literal["low", "medium", "high"]

class TaskCreate(BaseModel):
    title: str
    priority: Priority = "medium"

    @field_validator('title', mode='before')
    @classmethod
    def strip_title(cls, v):
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError("Title is required")
        return v

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    priority: Optional[Priority] = None
    done: Optional[bool] = None

class TaskResponse(BaseModel):
    id: int
    user_id: int
    title: str
    priority: str
    done: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
