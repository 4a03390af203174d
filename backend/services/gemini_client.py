"""Google Gemini API wrapper for the career assistant."""

import logging
from collections.abc import Sequence

from google import genai
from google.genai import types

from config import settings
from models.schemas.assistant_context import ChatMessage

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - assistant disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def _to_contents(messages: Sequence[ChatMessage]) -> list[types.Content]:
    # Gemini names the assistant side "model"
    return [
        types.Content(
            role="model" if m.role == "assistant" else "user",
            parts=[types.Part(text=m.content)],
        )
        for m in messages
    ]


async def generate_reply(system_prompt: str, messages: Sequence[ChatMessage]) -> str | None:
    """Send the conversation to Gemini. Returns None when unavailable or failing."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=_to_contents(messages),
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=0.7,
                max_output_tokens=1000,
            ),
        )
        text = (response.text or "").strip()
        return text or None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
