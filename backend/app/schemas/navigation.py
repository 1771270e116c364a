from pydantic import BaseModel
from typing import Optional

class RouteDecisionResponse(BaseModel):
    path: str
    action: str  # render, redirect, loading
    target: Optional[str] = None
