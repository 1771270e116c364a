from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.core.database import get_db
from app.core.permissions import get_optional_user
from app.core.route_guard import normalize_path
from app.core.session_context import restore_session
from app.models.user import User
from app.schemas.navigation import RouteDecisionResponse

router = APIRouter()

@router.get("/resolve", response_model=RouteDecisionResponse)
def resolve_route(
    path: str = Query(..., description="Client route, e.g. /dashboard/tasks"),
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    """Decide whether the caller may render a client route or must be redirected"""
    decision = restore_session(db, current_user).decide(path)
    return {"path": normalize_path(path), "action": decision.action, "target": decision.target}
