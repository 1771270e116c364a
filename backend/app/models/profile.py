from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base

# Fields that must be non-empty before the onboarding gate opens
REQUIRED_PROFILE_FIELDS = ("mobile", "date_of_birth", "university_roll_number")

class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)  # 1:1 with users
    mobile = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    university_roll_number = Column(String, nullable=True)
    profile_completed = Column(Boolean, default=False, nullable=False)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    user = relationship("User", back_populates="profile")
