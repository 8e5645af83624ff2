"""LLM provider wrapper: Gemini (google-genai) plus OpenAI-compatible APIs.

Which provider to call is an explicit LLMConfig value passed into every
call. Nothing here remembers a "current" provider between calls.
"""

import json
import logging
import re
from collections.abc import AsyncIterator
from functools import lru_cache
from typing import Literal

from google import genai
from google.genai import types
from openai import AsyncOpenAI
from pydantic import BaseModel, ConfigDict

from config import Settings

logger = logging.getLogger(__name__)

Provider = Literal["gemini", "openai", "groq"]

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
_MARKDOWN_JSON_RE = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")
MAX_DEBUG_TEXT_LENGTH = 500


class LLMError(Exception):
    """Base class for LLM failures the caller may recover from."""


class LLMNotConfiguredError(LLMError):
    pass


class LLMResponseError(LLMError):
    pass


class LLMConfig(BaseModel):
    """Immutable provider selection for one extraction call."""
    model_config = ConfigDict(frozen=True)

    provider: Provider
    api_key: str
    model: str
    temperature: float = 0.0
    max_output_tokens: int = 4096


def resolve_llm_config(settings: Settings) -> LLMConfig | None:
    """Build an LLMConfig from settings, or None when no provider has a key."""
    keys: dict[str, tuple[str, str]] = {
        "gemini": (settings.gemini_api_key, settings.gemini_model),
        "openai": (settings.openai_api_key, settings.openai_model),
        "groq": (settings.groq_api_key, settings.groq_model),
    }
    wanted = settings.llm_provider.strip().lower()
    if wanted:
        if wanted not in keys:
            logger.warning("Unknown LLM provider %r, LLM extraction disabled", wanted)
            return None
        candidates = [wanted]
    else:
        candidates = list(keys)

    for name in candidates:
        api_key, model = keys[name]
        if api_key:
            return LLMConfig(
                provider=name,
                api_key=api_key,
                model=model,
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
            )
    return None


@lru_cache(maxsize=8)
def _gemini_client(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


@lru_cache(maxsize=8)
def _openai_client(api_key: str, base_url: str | None) -> AsyncOpenAI:
    return AsyncOpenAI(api_key=api_key, base_url=base_url)


def _openai_compatible(config: LLMConfig) -> AsyncOpenAI:
    base_url = GROQ_BASE_URL if config.provider == "groq" else None
    return _openai_client(config.api_key, base_url)


def parse_json_response(text: str) -> dict:
    """Parse a model reply as a JSON object.

    Tolerates markdown code fences and chatter around the outermost braces.
    """
    body = text.strip()
    fenced = _MARKDOWN_JSON_RE.search(body)
    if fenced:
        body = fenced.group(1).strip()

    start, end = body.find("{"), body.rfind("}")
    if start != -1 and end > start:
        body = body[start:end + 1]

    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        logger.error(
            "Failed to parse LLM response as JSON: %s (raw: %r)",
            e, text[:MAX_DEBUG_TEXT_LENGTH],
        )
        raise LLMResponseError(f"Failed to parse AI response as JSON: {e}") from e
    if not isinstance(data, dict):
        raise LLMResponseError("AI response is not a JSON object")
    return data


async def _complete(prompt: str, config: LLMConfig) -> str:
    if config.provider == "gemini":
        response = await _gemini_client(config.api_key).aio.models.generate_content(
            model=config.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=config.temperature,
                max_output_tokens=config.max_output_tokens,
                response_mime_type="application/json",
            ),
        )
        return response.text or ""

    response = await _openai_compatible(config).chat.completions.create(
        model=config.model,
        messages=[{"role": "user", "content": prompt}],
        temperature=config.temperature,
        max_tokens=config.max_output_tokens,
        response_format={"type": "json_object"},
    )
    return response.choices[0].message.content or ""


async def generate_json(prompt: str, config: LLMConfig | None) -> dict:
    """Send a prompt to the configured provider and parse the JSON reply."""
    if config is None:
        raise LLMNotConfiguredError(
            "No AI provider configured. Set GEMINI_API_KEY, OPENAI_API_KEY or GROQ_API_KEY."
        )

    logger.info("Calling %s (%s)", config.provider, config.model)
    try:
        text = await _complete(prompt, config)
    except Exception as e:
        raise LLMResponseError(f"{config.provider} API error: {e}") from e
    return parse_json_response(text)


async def stream_text(prompt: str, config: LLMConfig) -> AsyncIterator[str]:
    """Yield raw text chunks from the provider as they arrive."""
    if config.provider == "gemini":
        stream = await _gemini_client(config.api_key).aio.models.generate_content_stream(
            model=config.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=config.temperature,
                max_output_tokens=config.max_output_tokens,
                response_mime_type="application/json",
            ),
        )
        async for chunk in stream:
            if chunk.text:
                yield chunk.text
        return

    stream = await _openai_compatible(config).chat.completions.create(
        model=config.model,
        messages=[{"role": "user", "content": prompt}],
        temperature=config.temperature,
        max_tokens=config.max_output_tokens,
        stream=True,
    )
    async for chunk in stream:
        if chunk.choices and chunk.choices[0].delta.content:
            yield chunk.choices[0].delta.content
