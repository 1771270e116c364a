from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from app.api.v1 import api_router
from app.core.config import settings
from app.core.database import init_db

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

class HealthCheckLogFilter(logging.Filter):
    """Filter to suppress only health-check access logs, keep all other logs"""
    def filter(self, record):
        return "/api/v1/health" not in record.getMessage()

# Apply filter to uvicorn access logger (where health-check polling shows up)
logging.getLogger("uvicorn.access").addFilter(HealthCheckLogFilter())

app = FastAPI(
    title="HackTrack API",
    description="Invite-only hackathon tracker API (v1)",
    version="1.0.0",
)

# CORS middleware - MUST be added before other middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
def startup_event():
    """Create tables on startup"""
    init_db()
    logger.info("HackTrack API started")

app.include_router(api_router, prefix="/api/v1")
