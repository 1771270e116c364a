from sqlalchemy.orm import Session
from app.models.user_role import UserRoleAssignment
from typing import Set

class RoleRepository:
    """Read side of the role store; `assign` is used only by out-of-band scripts."""

    def has_role(self, db: Session, user_id: int, role: str) -> bool:
        return db.query(UserRoleAssignment).filter(
            UserRoleAssignment.user_id == user_id,
            UserRoleAssignment.role == role,
        ).first() is not None

    def get_roles(self, db: Session, user_id: int) -> Set[str]:
        rows = db.query(UserRoleAssignment.role).filter(UserRoleAssignment.user_id == user_id).all()
        return {row[0] for row in rows}

    def assign(self, db: Session, user_id: int, role: str) -> UserRoleAssignment:
        existing = db.query(UserRoleAssignment).filter(
            UserRoleAssignment.user_id == user_id,
            UserRoleAssignment.role == role,
        ).first()
        if existing:
            return existing
        assignment = UserRoleAssignment(user_id=user_id, role=role)
        db.add(assignment)
        db.commit()
        db.refresh(assignment)
        return assignment
