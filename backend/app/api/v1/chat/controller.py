from fastapi import APIRouter, Depends
from app.core.permissions import get_onboarded_user
from app.models.user import User
from app.schemas.chat import ChatRequest, ChatResponse
from app.services.chat_service import ChatService

router = APIRouter()

def get_chat_service() -> ChatService:
    return ChatService()

@router.post("", response_model=ChatResponse)
def chat(
    request: ChatRequest,
    current_user: User = Depends(get_onboarded_user),
    service: ChatService = Depends(get_chat_service)
):
    """Stateless: the client sends the full conversation each time"""
    return {"reply": service.reply(request.messages)}
