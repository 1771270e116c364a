from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.core.permissions import get_current_user
from app.models.user import User
from app.schemas.user import UserResponse, ProfileResponse, ProfileCompletion
from app.services.auth_service import AuthService
from app.services.profile_service import ProfileService

router = APIRouter()

@router.get("/me", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return AuthService(db).describe(current_user)

@router.get("/me/profile", response_model=ProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ProfileService(db).get_profile(current_user)

@router.post("/me/complete-profile", response_model=ProfileResponse)
def complete_profile(
    data: ProfileCompletion,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Record the mandatory onboarding fields; opens the profile completion gate"""
    return ProfileService(db).complete_profile(current_user, data)
