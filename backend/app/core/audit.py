from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.models.audit_log import AuditLog
from app.models.user import User
from typing import Optional, Dict, Any
import json
import logging

logger = logging.getLogger(__name__)

class AuditService:
    @staticmethod
    def log_action(
        db: Session,
        action: str,
        performer: Optional[User],
        target_id: Optional[str] = None,
        target_type: Optional[str] = None,
        old_value: Optional[str] = None,
        new_value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        ip_address: Optional[str] = None
    ) -> bool:
        """
        Log an audit event to the database.

        Best effort: a failed audit write is logged and rolled back but never
        fails the operation being audited.
        """
        try:
            log_entry = AuditLog(
                action=action,
                performer_id=performer.id if performer else None,
                target_id=target_id,
                target_type=target_type,
                old_value=old_value,
                new_value=new_value,
                details=json.dumps(details) if details else None,
                ip_address=ip_address
            )
            db.add(log_entry)
            db.commit()
            logger.info(
                "[AUDIT] %s by %s on %s:%s",
                action, performer.email if performer else "system", target_type, target_id,
            )
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[AUDIT] Failed to write audit log for {action}: {e}")
            return False
