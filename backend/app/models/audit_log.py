from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from app.core.database import Base

class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String, nullable=False, index=True)  # e.g., "REQUEST_APPROVED", "EVENT_APPROVED"
    performer_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # User who performed the action
    target_id = Column(String, nullable=True)  # ID of the object being acted upon
    target_type = Column(String, nullable=True)  # "REQUEST", "EVENT", "USER"
    old_value = Column(Text, nullable=True)
    new_value = Column(Text, nullable=True)
    details = Column(Text, nullable=True)  # JSON
    ip_address = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    performer = relationship("User", foreign_keys=[performer_id])
