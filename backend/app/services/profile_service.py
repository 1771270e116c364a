from sqlalchemy.orm import Session
from datetime import datetime
import logging

from app.core.exceptions import InvalidTransitionError, ValidationError
from app.models.profile import Profile, REQUIRED_PROFILE_FIELDS
from app.models.user import User
from app.repositories.profile_repository import ProfileRepository
from app.schemas.user import ProfileCompletion

logger = logging.getLogger(__name__)

class ProfileService:
    def __init__(self, db: Session):
        self.db = db
        self.profile_repo = ProfileRepository()

    def get_profile(self, user: User) -> Profile:
        profile = self.profile_repo.get_by_user(self.db, user.id)
        if profile is None:
            # Identities created outside the provisioning flow
            profile = Profile(user_id=user.id, profile_completed=False)
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)
        return profile

    def complete_profile(self, user: User, data: ProfileCompletion) -> Profile:
        profile = self.get_profile(user)
        if profile.profile_completed:
            raise InvalidTransitionError("Profile", "completed", "completed")

        missing = [f for f in REQUIRED_PROFILE_FIELDS if not getattr(data, f)]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        profile.mobile = data.mobile
        profile.date_of_birth = data.date_of_birth
        profile.university_roll_number = data.university_roll_number
        profile.profile_completed = True
        profile.completed_at = datetime.utcnow()
        profile = self.profile_repo.update(self.db, profile)
        logger.info(f"[PROFILE] Profile completed for {user.email}")
        return profile
