import logging
import requests
from typing import List, Optional

from app.core.config import settings
from app.core.exceptions import UpstreamServiceError
from app.schemas.chat import ChatMessage

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are HackTrack AI, a professional and friendly hackathon preparation assistant. You help users with:
- Summarizing hackathon brochures
- Creating preparation plans and checklists
- Suggesting project ideas based on hackathon themes
- Study schedule planning
- Productivity coaching and tips
- General hackathon advice

Be concise, actionable, and encouraging. Use emojis sparingly for personality."""

FALLBACK_REPLY = "Sorry, I couldn't generate a response."

class ChatService:
    """Stateless proxy to an OpenAI-compatible chat completions endpoint."""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None,
                 model: Optional[str] = None, timeout: Optional[int] = None):
        self.api_key = api_key if api_key is not None else settings.AI_API_KEY
        self.base_url = base_url or settings.AI_GATEWAY_URL
        self.model = model or settings.AI_MODEL
        self.timeout = timeout or settings.AI_TIMEOUT_SECONDS

    def reply(self, messages: List[ChatMessage]) -> str:
        if not self.api_key:
            raise UpstreamServiceError("AI assistant is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }
        payload = {
            "model": self.model,
            "messages": [{"role": "system", "content": SYSTEM_PROMPT}]
                        + [{"role": m.role, "content": m.content} for m in messages],
        }

        try:
            response = requests.post(self.base_url, headers=headers, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"AI chat request failed: {e}")
            raise UpstreamServiceError("AI assistant is unreachable. Please try again.")

        if not response.ok:
            logger.error(f"AI API error: {response.status_code} {response.text[:500]}")
            raise UpstreamServiceError(f"AI API error: {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            logger.error("AI API returned a non-JSON body")
            raise UpstreamServiceError("AI API returned an invalid response")

        choices = data.get("choices") or []
        content = None
        if choices:
            content = (choices[0].get("message") or {}).get("content")
        return content or FALLBACK_REPLY
