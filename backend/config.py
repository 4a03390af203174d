import os
from pathlib import Path

from pydantic_settings import BaseSettings

DATA_DIR = Path(__file__).resolve().parent / "data"


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    # Reference data tables, validated once at load time
    skills_file: Path = DATA_DIR / "skills.json"
    roles_file: Path = DATA_DIR / "roles.json"

    # Assistant (optional; chat degrades without a key)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    max_upload_size_mb: int = 5
    rate_limit: str = "30/minute"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
