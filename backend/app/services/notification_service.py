from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
import logging

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.models.notification import Notification
from app.models.user import User
from app.repositories.notification_repository import NotificationRepository

logger = logging.getLogger(__name__)

UNREAD_MODE_PAGE = "page"
UNREAD_MODE_SERVER = "server"

class NotificationService:
    def __init__(self, db: Session, unread_count_mode: Optional[str] = None):
        self.db = db
        self.notification_repo = NotificationRepository()
        self.unread_count_mode = unread_count_mode or settings.UNREAD_COUNT_MODE

    def notify(self, user_id: int, message: str) -> Optional[Notification]:
        """Best-effort insert; a failure is logged and never blocks the caller."""
        try:
            return self.notification_repo.create(self.db, Notification(user_id=user_id, message=message))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"[NOTIFY] Could not notify user {user_id}: {e}")
            return None

    def get_feed(self, user: User, limit: Optional[int] = None) -> dict:
        limit = limit or settings.NOTIFICATION_FETCH_LIMIT
        items = self.notification_repo.get_for_user(self.db, user.id, limit=limit)
        if self.unread_count_mode == UNREAD_MODE_SERVER:
            unread = self.notification_repo.count_unread(self.db, user.id)
        else:
            # Derived from the fetched page; under-counts past `limit`
            unread = sum(1 for n in items if not n.read)
        return {
            "notifications": items,
            "unread_count": unread,
            "unread_count_mode": self.unread_count_mode,
        }

    def unread_count(self, user: User) -> int:
        return self.notification_repo.count_unread(self.db, user.id)

    def mark_read(self, user: User, notification_id: int) -> Notification:
        notification = self.notification_repo.get_by_id(self.db, notification_id)
        # Other users' notifications are indistinguishable from missing ones
        if not notification or notification.user_id != user.id:
            raise NotFoundError("Notification not found")
        return self.notification_repo.mark_read(self.db, notification)

    def mark_all_read(self, user: User) -> int:
        updated = self.notification_repo.mark_all_read(self.db, user.id)
        logger.debug(f"[NOTIFY] Marked {updated} notifications read for user {user.id}")
        return updated
