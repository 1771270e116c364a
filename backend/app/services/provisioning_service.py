from dataclasses import dataclass
from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.audit import AuditService
from app.core.exceptions import NotFoundError
from app.core.security import generate_temp_password, get_password_hash
from app.models.profile import Profile
from app.models.user import User
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AccountProvisioningFailed(Exception):
    """Raised by a provisioner when the account could not be created."""


@dataclass
class ProvisionedAccount:
    user: User
    temp_password: str


class ProvisioningService:
    """
    Creates a new identity bound to an email address.

    The account is marked email-verified, gets an empty profile
    (profile_completed=False) and a single-use temporary credential that is
    returned once and stored only as a bcrypt hash.
    """

    def __init__(self, db: Session):
        self.db = db
        self.user_repo = UserRepository()

    def provision(self, email: str, name: Optional[str] = None) -> ProvisionedAccount:
        email = (email or "").strip().lower()
        if not email:
            raise AccountProvisioningFailed("Email is required")

        if self.user_repo.get_by_email(self.db, email):
            raise AccountProvisioningFailed("An account with this email already exists")

        temp_password = generate_temp_password()
        user = User(
            email=email,
            name=name.strip() if name and name.strip() else None,
            hashed_password=get_password_hash(temp_password),
            email_verified=True,
            must_change_password=True,
            temp_password_consumed=False,
            is_active=True,
        )
        user.profile = Profile(profile_completed=False)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[PROVISIONING] Failed to create account for {email}: {e}")
            raise AccountProvisioningFailed("Account could not be created") from e

        logger.info(f"[PROVISIONING] Account created for {email} (user_id={user.user_id})")
        return ProvisionedAccount(user=user, temp_password=temp_password)

    def reissue(self, email: str, performer: Optional[User] = None) -> ProvisionedAccount:
        """Replace an existing account's credential with a fresh temporary one."""
        user = self.user_repo.get_by_email(self.db, (email or "").strip())
        if user is None:
            raise NotFoundError("No account exists for this email")

        temp_password = generate_temp_password()
        user.hashed_password = get_password_hash(temp_password)
        user.must_change_password = True
        user.temp_password_consumed = False
        self.user_repo.update(self.db, user)
        AuditService.log_action(
            db=self.db,
            action="CREDENTIAL_REISSUED",
            performer=performer,
            target_id=str(user.id),
            target_type="USER",
        )
        logger.info(f"[PROVISIONING] Temporary credential reissued for {user.email}")
        return ProvisionedAccount(user=user, temp_password=temp_password)
