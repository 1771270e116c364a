from typing import List, Optional
import logging
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.exceptions import AuthError, ForbiddenError
from app.core.security import decode_access_token
from app.models.user import User
from app.models.user_role import ADMIN_ROLE
from app.repositories.profile_repository import ProfileRepository
from app.repositories.role_repository import RoleRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

# auto_error=False so a missing header surfaces as our 401, not FastAPI's default
security = HTTPBearer(auto_error=False)

def get_current_user_from_token(token: str, db: Session) -> User:
    payload = decode_access_token(token)
    if not payload:
        raise AuthError("Invalid token")

    subject: Optional[str] = payload.get("sub")
    if subject is None:
        raise AuthError("Invalid token")

    user = UserRepository().get_by_user_id(db, subject)
    if user is None:
        raise AuthError("User not found")

    if not user.is_active:
        raise ForbiddenError("User is inactive")

    return user

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    if credentials is None or not credentials.credentials:
        raise AuthError("Not authenticated")
    return get_current_user_from_token(credentials.credentials, db)

def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Current user, or None for anonymous callers and unusable tokens"""
    if credentials is None or not credentials.credentials:
        return None
    try:
        return get_current_user_from_token(credentials.credentials, db)
    except (AuthError, ForbiddenError):
        return None

def get_onboarded_user(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> User:
    """Feature endpoints stay closed until the profile completion gate is passed"""
    if not ProfileRepository().is_completed(db, current_user.id):
        raise ForbiddenError("Complete your profile to continue")
    return current_user

def require_roles(allowed_roles: List[str]):
    def role_checker(
        current_user: User = Depends(get_current_user),
        db: Session = Depends(get_db)
    ) -> User:
        roles = RoleRepository().get_roles(db, current_user.id)
        if not roles.intersection(r.lower() for r in allowed_roles):
            logger.warning(f"[PERMISSIONS] Denied {current_user.email}: requires one of {allowed_roles}")
            raise ForbiddenError("Insufficient permissions")
        return current_user
    return role_checker

def get_admin_user(current_user: User = Depends(require_roles([ADMIN_ROLE]))) -> User:
    return current_user
