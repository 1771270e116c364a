from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.sql import func
from app.core.database import Base

class AccessRequestStatus:
    PENDING = "pending"
    # Intermediate state while the account is being created
    APPROVED_PENDING_PROVISIONING = "approved_pending_provisioning"
    APPROVED = "approved"
    REJECTED = "rejected"

    TERMINAL = (APPROVED, REJECTED)
    ALL = (PENDING, APPROVED_PENDING_PROVISIONING, APPROVED, REJECTED)

class AccessRequest(Base):
    __tablename__ = "access_requests"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    reason = Column(Text, nullable=True)
    status = Column(String, default=AccessRequestStatus.PENDING, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
    reviewed_by = Column(Integer, ForeignKey("users.id"), nullable=True)  # Admin who decided
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    provisioned_user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    version = Column(Integer, nullable=False, default=1)

    __mapper_args__ = {"version_id_col": version}
