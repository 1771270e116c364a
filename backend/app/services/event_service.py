from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError
from typing import List
import logging

from app.core.audit import AuditService
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from app.models.event import Event
from app.models.user import User
from app.models.user_role import ADMIN_ROLE
from app.repositories.event_repository import EventRepository
from app.repositories.role_repository import RoleRepository
from app.schemas.event import EventCreate
from app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

SUBMITTED_MESSAGE = 'Your event "{title}" has been submitted for approval.'
APPROVED_MESSAGE = 'Your event "{title}" has been approved! 🎉'

class EventService:
    def __init__(self, db: Session):
        self.db = db
        self.event_repo = EventRepository()
        self.role_repo = RoleRepository()
        self.notifications = NotificationService(db)

    def _is_admin(self, user: User) -> bool:
        return self.role_repo.has_role(self.db, user.id, ADMIN_ROLE)

    def list_events(self, user: User) -> List[Event]:
        if self._is_admin(user):
            return self.event_repo.get_all(self.db)
        return self.event_repo.get_visible_to(self.db, user.id)

    def create_event(self, user: User, data: EventCreate) -> Event:
        is_admin = self._is_admin(user)
        event = Event(
            title=data.title,
            description=data.description,
            event_date=data.event_date,
            created_by=user.id,
            visibility=data.visibility,
            # Admin-created events skip the self-approval step
            approved=is_admin,
        )
        event = self.event_repo.create(self.db, event)
        if not is_admin:
            self.notifications.notify(user.id, SUBMITTED_MESSAGE.format(title=event.title))
        logger.info(f"[EVENTS] Event {event.id} created by {user.email} (approved={event.approved})")
        return event

    def approve_event(self, event_id: int, admin: User) -> Event:
        if not self._is_admin(admin):
            raise ForbiddenError("Admin role required")

        event = self.event_repo.get_by_id(self.db, event_id)
        if not event:
            raise NotFoundError("Event not found")

        if event.approved:
            return event

        event.approved = True
        try:
            event = self.event_repo.update(self.db, event)
        except StaleDataError:
            self.db.rollback()
            raise ConflictError()

        self.notifications.notify(event.created_by, APPROVED_MESSAGE.format(title=event.title))
        AuditService.log_action(
            db=self.db,
            action="EVENT_APPROVED",
            performer=admin,
            target_id=str(event.id),
            target_type="EVENT",
        )
        return event

    def delete_event(self, event_id: int, user: User) -> None:
        event = self.event_repo.get_by_id(self.db, event_id)
        if not event:
            raise NotFoundError("Event not found")

        if event.created_by != user.id and not self._is_admin(user):
            raise ForbiddenError("Only the creator or an admin can delete this event")

        self.event_repo.delete(self.db, event)
        logger.info(f"[EVENTS] Event {event_id} deleted by {user.email}")
