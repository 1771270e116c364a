# API v1 routers
from fastapi import APIRouter

from app.api.v1.access_requests.controller import router as access_requests_router
from app.api.v1.admin.controller import router as admin_router
from app.api.v1.auth.controller import router as auth_router
from app.api.v1.chat.controller import router as chat_router
from app.api.v1.events.controller import router as events_router
from app.api.v1.health.controller import router as health_router
from app.api.v1.navigation.controller import router as navigation_router
from app.api.v1.notifications.controller import router as notifications_router
from app.api.v1.tasks.controller import router as tasks_router
from app.api.v1.users.controller import router as users_router

api_router = APIRouter()
api_router.include_router(health_router, prefix="/health", tags=["health"])
api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(access_requests_router, prefix="/access-requests", tags=["access-requests"])
api_router.include_router(admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(navigation_router, prefix="/navigation", tags=["navigation"])
api_router.include_router(tasks_router, prefix="/tasks", tags=["tasks"])
api_router.include_router(events_router, prefix="/events", tags=["events"])
api_router.include_router(notifications_router, prefix="/notifications", tags=["notifications"])
api_router.include_router(chat_router, prefix="/chat", tags=["chat"])

__all__ = ["api_router"]
