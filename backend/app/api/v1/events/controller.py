from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from app.core.database import get_db
from app.core.permissions import get_admin_user, get_onboarded_user
from app.models.user import User
from app.schemas.event import EventCreate, EventResponse
from app.services.event_service import EventService

router = APIRouter()

def get_event_service(db: Session = Depends(get_db)) -> EventService:
    return EventService(db)

@router.get("", response_model=List[EventResponse])
def list_events(
    current_user: User = Depends(get_onboarded_user),
    service: EventService = Depends(get_event_service)
):
    """Events ordered by date; non-admins see approved shared events and their own"""
    return service.list_events(current_user)

@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    data: EventCreate,
    current_user: User = Depends(get_onboarded_user),
    service: EventService = Depends(get_event_service)
):
    return service.create_event(current_user, data)

@router.post("/{event_id}/approve", response_model=EventResponse)
def approve_event(
    event_id: int,
    admin: User = Depends(get_admin_user),
    service: EventService = Depends(get_event_service)
):
    """Approve an event and notify its creator"""
    return service.approve_event(event_id, admin)

@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    current_user: User = Depends(get_onboarded_user),
    service: EventService = Depends(get_event_service)
):
    service.delete_event(event_id, current_user)
