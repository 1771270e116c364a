from pydantic import BaseModel, ConfigDict
from typing import List
from datetime import datetime

class NotificationResponse(BaseModel):
    id: int
    message: str
    read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class NotificationFeed(BaseModel):
    notifications: List[NotificationResponse]
    unread_count: int
    # "page" or "server", see Settings.UNREAD_COUNT_MODE
    unread_count_mode: str

class UnreadCount(BaseModel):
    unread_count: int
