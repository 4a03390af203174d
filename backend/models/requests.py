from typing import Literal

from pydantic import BaseModel, Field

from models.schemas.assistant_context import AssistantContext, ChatMessage


class ExtractRequest(BaseModel):
    text: str = Field(..., description="Resume body, pasted profile text or free-form entry")
    source: Literal["manual", "resume", "linkedin"] = "manual"


class ResolveRequest(BaseModel):
    inputs: list[str] = Field(..., max_length=200, description="Manually entered skill chips")


class AnalyzeRequest(BaseModel):
    role_id: str
    skills: list[str] = Field([], description="Canonical skill ids")
    raw_inputs: list[str] = Field([], description="Unresolved skill chips, resolved against the vocabulary")


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = Field(..., min_length=1, max_length=50)
    context: AssistantContext = AssistantContext()
