from sqlalchemy.orm import Session
from app.models.profile import Profile
from typing import Optional

class ProfileRepository:
    def get_by_user(self, db: Session, user_id: int) -> Optional[Profile]:
        return db.query(Profile).filter(Profile.user_id == user_id).first()

    def is_completed(self, db: Session, user_id: int) -> bool:
        profile = self.get_by_user(db, user_id)
        return bool(profile and profile.profile_completed)

    def update(self, db: Session, profile: Profile) -> Profile:
        db.commit()
        db.refresh(profile)
        return profile
