import os
from pydantic_settings import BaseSettings


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
    # LLM extraction; "" picks the first provider that has a key (gemini > openai > groq)
    llm_provider: str = ""
    gemini_api_key: str = ""
    openai_api_key: str = ""
    groq_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    openai_model: str = "gpt-4.1-nano"
    groq_model: str = "openai/gpt-oss-20b"
    llm_temperature: float = 0.0
    llm_max_output_tokens: int = 4096

    max_upload_size_mb: int = 5
    max_job_text_chars: int = 20000
    max_resume_text_chars: int = 50000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    rate_limit: str = "10/minute"
    rate_limit_enabled: bool = True

    store_path: str = ""  # empty keeps records in memory only
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
