from pydantic import BaseModel, Field

class LoginRequest(BaseModel):
    email: str = Field(..., description="Account email address")
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    must_change_password: bool = False
    user: dict

class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str = Field(..., min_length=8, description="New password (minimum 8 characters)")

class MessageResponse(BaseModel):
    message: str
