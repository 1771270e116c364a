from sqlalchemy.orm import Session
from datetime import datetime
import logging

from app.core.exceptions import AuthError, ForbiddenError, ValidationError
from app.core.security import verify_password, create_access_token, get_password_hash
from app.models.user import User
from app.repositories.profile_repository import ProfileRepository
from app.repositories.role_repository import RoleRepository
from app.repositories.user_repository import UserRepository
from app.schemas.auth import LoginRequest, ChangePasswordRequest

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository()
        self.role_repo = RoleRepository()
        self.profile_repo = ProfileRepository()

    def login(self, login_data: LoginRequest) -> dict:
        email = login_data.email.strip()
        if not email:
            raise ValidationError("Email is required")

        user = self.user_repo.get_by_email(self.db, email)
        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.info(f"[AUTH] Login failed for {email}")
            raise AuthError("Incorrect email or password")

        if not user.is_active:
            logger.info(f"[AUTH] [BLOCKED] Login blocked for {email} - account inactive")
            raise ForbiddenError("User account is inactive")

        if user.must_change_password:
            # Temporary credentials are single-use
            if user.temp_password_consumed:
                logger.warning(f"[AUTH] Reuse of temporary password for {email}")
                raise AuthError("Temporary password already used. Ask an administrator to reissue it.")
            user.temp_password_consumed = True

        user.last_seen = datetime.utcnow()
        self.user_repo.update(self.db, user)
        logger.info(f"[AUTH] Login successful for {email}")

        return {
            "access_token": create_access_token({"sub": user.user_id}),
            "token_type": "bearer",
            "must_change_password": user.must_change_password,
            "user": self.describe(user),
        }

    def logout(self, user: User) -> None:
        user.last_seen = datetime.utcnow()
        self.user_repo.update(self.db, user)

    def change_password(self, user: User, data: ChangePasswordRequest) -> None:
        if not verify_password(data.current_password, user.hashed_password):
            raise AuthError("Current password is incorrect")
        if data.current_password == data.new_password:
            raise ValidationError("New password must differ from the current password")

        user.hashed_password = get_password_hash(data.new_password)
        user.must_change_password = False
        user.temp_password_consumed = False
        self.user_repo.update(self.db, user)
        logger.info(f"[AUTH] Password changed for {user.email}")

    def describe(self, user: User) -> dict:
        """Identity summary: the inputs the client needs for route decisions."""
        return {
            "id": user.id,
            "user_id": user.user_id,
            "email": user.email,
            "name": user.name,
            "email_verified": user.email_verified,
            "must_change_password": user.must_change_password,
            "is_active": user.is_active,
            "roles": sorted(self.role_repo.get_roles(self.db, user.id)),
            "profile_completed": self.profile_repo.is_completed(self.db, user.id),
            "created_at": user.created_at,
            "last_seen": user.last_seen,
        }
