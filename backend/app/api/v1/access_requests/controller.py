from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.admin import AccessRequestCreate, AccessRequestResponse
from app.services.access_request_service import AccessRequestService

router = APIRouter()

@router.post("", response_model=AccessRequestResponse, status_code=status.HTTP_201_CREATED)
def create_request(
    request_data: AccessRequestCreate,
    db: Session = Depends(get_db)
):
    """Create a new access request (public endpoint) - does NOT create an account"""
    return AccessRequestService(db).submit(request_data)
