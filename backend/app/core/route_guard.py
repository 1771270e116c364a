"""
Route authorization decisions.

`decide_route` is a pure function of the session inputs: it performs no I/O
and reads no global state. Callers obtain the inputs from a SessionContext.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

from app.models.user_role import ADMIN_ROLE

LOGIN_PATH = "/login"
COMPLETE_PROFILE_PATH = "/dashboard/complete-profile"
DEFAULT_LANDING_PATH = "/dashboard"

class RouteRequirement:
    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"

ROUTE_TABLE = {
    "/": RouteRequirement.PUBLIC,
    "/login": RouteRequirement.PUBLIC,
    "/request-access": RouteRequirement.PUBLIC,
    "/reset-password": RouteRequirement.PUBLIC,
    "/dashboard": RouteRequirement.AUTHENTICATED,
    "/dashboard/upload": RouteRequirement.AUTHENTICATED,
    "/dashboard/events": RouteRequirement.AUTHENTICATED,
    "/dashboard/tasks": RouteRequirement.AUTHENTICATED,
    "/dashboard/chat": RouteRequirement.AUTHENTICATED,
    "/dashboard/calendar": RouteRequirement.AUTHENTICATED,
    "/dashboard/reminders": RouteRequirement.AUTHENTICATED,
    "/dashboard/settings": RouteRequirement.AUTHENTICATED,
    "/dashboard/complete-profile": RouteRequirement.AUTHENTICATED,
    "/dashboard/admin": RouteRequirement.ADMIN,
}


@dataclass(frozen=True)
class RouteDecision:
    action: str  # render, redirect, loading
    target: Optional[str] = None

    RENDER = "render"
    REDIRECT = "redirect"
    LOADING = "loading"

    @classmethod
    def render(cls) -> "RouteDecision":
        return cls(cls.RENDER)

    @classmethod
    def redirect(cls, target: str) -> "RouteDecision":
        return cls(cls.REDIRECT, target)

    @classmethod
    def loading(cls) -> "RouteDecision":
        return cls(cls.LOADING)


def normalize_path(path: str) -> str:
    path = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"


def requirement_for(path: str) -> str:
    """Unknown paths are treated as authenticated-only."""
    return ROUTE_TABLE.get(normalize_path(path), RouteRequirement.AUTHENTICATED)


def decide_route(
    has_session: bool,
    profile_completed: bool,
    current_path: str,
    roles: Iterable[str],
    requirement: str,
    loading: bool = False,
) -> RouteDecision:
    if loading:
        return RouteDecision.loading()

    if requirement != RouteRequirement.PUBLIC and not has_session:
        return RouteDecision.redirect(LOGIN_PATH)

    if has_session and not profile_completed and normalize_path(current_path) != COMPLETE_PROFILE_PATH:
        return RouteDecision.redirect(COMPLETE_PROFILE_PATH)

    if requirement == RouteRequirement.ADMIN and ADMIN_ROLE not in set(roles):
        return RouteDecision.redirect(DEFAULT_LANDING_PATH)

    return RouteDecision.render()
