"""Shared dependencies for API routes."""

from fastapi import Header, HTTPException

from config import settings
from services.llm_client import LLMConfig, resolve_llm_config
from services.store import RecordStore, get_store


def get_llm_config() -> LLMConfig | None:
    return resolve_llm_config(settings)


def get_record_store() -> RecordStore:
    return get_store()


def get_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Caller identity from the X-User-Id header; authentication happens upstream."""
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Unauthorized - you must be logged in")
    return x_user_id.strip()
