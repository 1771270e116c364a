from sqlalchemy.orm import Session
from app.models.access_request import AccessRequest, AccessRequestStatus
from typing import List, Optional

class AccessRequestRepository:
    def get_all(self, db: Session, status: Optional[str] = None, skip: int = 0, limit: int = 100) -> List[AccessRequest]:
        query = db.query(AccessRequest)
        if status:
            query = query.filter(AccessRequest.status == status)
        return query.order_by(AccessRequest.created_at.desc(), AccessRequest.id.desc()).offset(skip).limit(limit).all()

    def get_by_id(self, db: Session, request_id: int) -> Optional[AccessRequest]:
        return db.query(AccessRequest).filter(AccessRequest.id == request_id).first()

    def get_open_by_email(self, db: Session, email: str) -> Optional[AccessRequest]:
        """A request for this email that has not been rejected yet"""
        return db.query(AccessRequest).filter(
            AccessRequest.email == email,
            AccessRequest.status != AccessRequestStatus.REJECTED,
        ).first()

    def create(self, db: Session, request: AccessRequest) -> AccessRequest:
        db.add(request)
        db.commit()
        db.refresh(request)
        return request

    def update(self, db: Session, request: AccessRequest) -> AccessRequest:
        db.commit()
        db.refresh(request)
        return request
