from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List
from datetime import date, datetime

class UserResponse(BaseModel):
    id: int
    user_id: str
    email: str
    name: Optional[str] = None
    email_verified: bool = False
    must_change_password: bool = False
    is_active: bool = True
    roles: List[str] = []
    profile_completed: bool = False
    created_at: Optional[datetime] = None
    last_seen: Optional[datetime] = None

class ProfileResponse(BaseModel):
    user_id: int
    mobile: Optional[str] = None
    date_of_birth: Optional[date] = None
    university_roll_number: Optional[str] = None
    profile_completed: bool = False
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

class ProfileCompletion(BaseModel):
    # Validated by the service so missing fields surface as one ValidationError
    mobile: Optional[str] = None
    date_of_birth: Optional[date] = None
    university_roll_number: Optional[str] = None

    @field_validator('mobile', 'university_roll_number', mode='before')
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator('date_of_birth', mode='before')
    @classmethod
    def empty_date_to_none(cls, v):
        if v == "":
            return None
        return v
