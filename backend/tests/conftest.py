"""Shared test configuration and pytest markers."""

import os

# Provider-free, limit-free environment before the app and settings import
for _key in ("GEMINI_API_KEY", "OPENAI_API_KEY", "GROQ_API_KEY", "LLM_PROVIDER", "STORE_PATH"):
    os.environ[_key] = ""
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest  # noqa: E402

from services.store import reset_store  # noqa: E402


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "golden: pinned scoring outputs that must not drift"
    )


@pytest.fixture(autouse=True)
def _fresh_store():
    """Give every test an empty record store."""
    reset_store()
    yield
    reset_store()
