from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.core.config import settings
from app.core.database import get_db
from app.core.permissions import get_current_user
from app.models.user import User
from app.schemas.notification import NotificationFeed, NotificationResponse, UnreadCount
from app.services.notification_service import NotificationService

router = APIRouter()

def get_notification_service(db: Session = Depends(get_db)) -> NotificationService:
    return NotificationService(db)

@router.get("", response_model=NotificationFeed)
def list_notifications(
    limit: int = Query(settings.NOTIFICATION_FETCH_LIMIT, ge=1, le=200),
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    """Newest first"""
    return service.get_feed(current_user, limit)

@router.get("/unread-count", response_model=UnreadCount)
def unread_count(
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    return {"unread_count": service.unread_count(current_user)}

@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    return service.mark_read(current_user, notification_id)

@router.post("/read-all", response_model=UnreadCount)
def mark_all_read(
    current_user: User = Depends(get_current_user),
    service: NotificationService = Depends(get_notification_service)
):
    service.mark_all_read(current_user)
    return {"unread_count": 0}
