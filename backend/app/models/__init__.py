from app.models.user import User
from app.models.profile import Profile
from app.models.user_role import UserRoleAssignment
from app.models.access_request import AccessRequest, AccessRequestStatus
from app.models.notification import Notification
from app.models.event import Event
from app.models.task import Task
from app.models.audit_log import AuditLog

__all__ = [
    "User", "Profile", "UserRoleAssignment", "AccessRequest", "AccessRequestStatus",
    "Notification", "Event", "Task", "AuditLog"
]
