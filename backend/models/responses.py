from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    skills_loaded: int = 0
    roles_loaded: int = 0
    assistant_configured: bool = False


class SkillsResponse(BaseModel):
    """Canonical skill ids, in extraction or resolution order."""
    skills: list[str] = []


class ChatResponse(BaseModel):
    reply: str = ""
    degraded: bool = False
