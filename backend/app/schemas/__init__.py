from app.schemas.auth import LoginRequest, TokenResponse, ChangePasswordRequest
from app.schemas.user import UserResponse, ProfileResponse, ProfileCompletion
from app.schemas.admin import AccessRequestCreate, AccessRequestResponse, AccessDecisionResponse

__all__ = [
    "LoginRequest",
    "TokenResponse",
    "ChangePasswordRequest",
    "UserResponse",
    "ProfileResponse",
    "ProfileCompletion",
    "AccessRequestCreate",
    "AccessRequestResponse",
    "AccessDecisionResponse",
]
