"""LLM extraction strategy: prompt, parse, repair and validate.

Models drift from the requested shape in predictable ways (nulls for empty
lists, {} instead of [], bare strings as keywords, a single "dates" field,
camelCase keys). Those are repaired here before pydantic validation; any
other mismatch is an LLMResponseError and the caller falls back.
"""

import logging
import re
from typing import Any

from pydantic import ValidationError

from models.schemas.extraction import JobExtraction, ResumeExtraction
from services import llm_client, prompt_builder
from services.llm_client import LLMConfig, LLMResponseError

logger = logging.getLogger(__name__)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")
_CURRENT_RE = re.compile(r"presente|present|atual|current", re.IGNORECASE)
_RANGE_RE = re.compile(r"(\d{4})\s*-\s*(\d{4}|presente|present|atual|current)", re.IGNORECASE)
_YEAR_RE = re.compile(r"(\d{4})")

_JOB_LISTS = ("required_skills", "preferred_skills", "keywords")
_JOB_STRINGS = ("title", "description")
_RESUME_LISTS = ("skills", "experience", "education")
_EXPERIENCE_STRINGS = ("title", "company")
_EDUCATION_STRINGS = ("degree", "institution")


def parse_date_range(dates: Any) -> tuple[str | None, str | None]:
    """Split "2018 - 2020" / "2020 - Present" / "2019" into (start, end).

    A current position has no end date.
    """
    if not dates or not isinstance(dates, str):
        return None, None

    is_current = bool(_CURRENT_RE.search(dates))
    match = _RANGE_RE.search(dates)
    if match:
        return match.group(1), None if is_current else match.group(2)

    year = _YEAR_RE.search(dates)
    if year:
        return year.group(1), None if is_current else year.group(1)
    return None, None


def _snake_keys(data: dict) -> dict:
    return {_CAMEL_RE.sub("_", k).lower(): v for k, v in data.items()}


def _as_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    # null, {} and scalars all mean "no items"
    return []


def _to_frequency(value: Any) -> int:
    try:
        return max(0, int(round(float(value))))
    except (TypeError, ValueError, OverflowError):
        return 1


def _normalize_keywords(items: list) -> list[dict]:
    keywords = []
    for item in items:
        if isinstance(item, str):
            keywords.append({"word": item, "frequency": 1})
        elif isinstance(item, dict) and item.get("word"):
            keywords.append({
                "word": str(item["word"]),
                "frequency": _to_frequency(item.get("frequency", 1)),
            })
    return keywords


def _normalize_strings(items: list) -> list[str]:
    return [str(s) for s in items if s is not None and str(s).strip()]


def _normalize_entry(item: dict, required: tuple[str, ...]) -> dict:
    entry = _snake_keys(item)
    if "dates" in entry:
        dates = entry.pop("dates")
        if isinstance(dates, str):
            entry["start_date"], entry["end_date"] = parse_date_range(dates)
    if isinstance(entry.get("description"), list):
        entry["description"] = "\n".join(str(line) for line in entry["description"])
    for key in required:
        if entry.get(key) is None:
            entry[key] = ""
    return entry


def normalize_job_payload(data: dict) -> dict:
    payload = _snake_keys(data)
    for key in _JOB_LISTS:
        payload[key] = _as_list(payload.get(key))
    for key in _JOB_STRINGS:
        if payload.get(key) is None:
            payload[key] = ""
    payload["required_skills"] = _normalize_strings(payload["required_skills"])
    payload["preferred_skills"] = _normalize_strings(payload["preferred_skills"])
    payload["keywords"] = _normalize_keywords(payload["keywords"])
    return payload


def normalize_resume_payload(data: dict) -> dict:
    payload = _snake_keys(data)
    for key in _RESUME_LISTS:
        payload[key] = _as_list(payload.get(key))
    payload["skills"] = _normalize_strings(payload["skills"])
    payload["experience"] = [
        _normalize_entry(e, _EXPERIENCE_STRINGS)
        for e in payload["experience"] if isinstance(e, dict)
    ]
    payload["education"] = [
        _normalize_entry(e, _EDUCATION_STRINGS)
        for e in payload["education"] if isinstance(e, dict)
    ]
    return payload


async def extract_job(job_text: str, config: LLMConfig | None) -> JobExtraction:
    """Extract job fields with the configured LLM."""
    data = await llm_client.generate_json(prompt_builder.build_job_prompt(job_text), config)
    try:
        extraction = JobExtraction.model_validate(normalize_job_payload(data))
    except ValidationError as e:
        raise LLMResponseError(f"AI job extraction did not match schema: {e}") from e

    logger.info(
        "LLM job extraction: title=%r required=%d preferred=%d keywords=%d",
        extraction.title,
        len(extraction.required_skills),
        len(extraction.preferred_skills),
        len(extraction.keywords),
    )
    return extraction


async def extract_resume(resume_text: str, config: LLMConfig | None) -> ResumeExtraction:
    """Extract resume fields with the configured LLM."""
    data = await llm_client.generate_json(prompt_builder.build_resume_prompt(resume_text), config)
    try:
        extraction = ResumeExtraction.model_validate(normalize_resume_payload(data))
    except ValidationError as e:
        raise LLMResponseError(f"AI resume extraction did not match schema: {e}") from e

    logger.info(
        "LLM resume extraction: skills=%d experience=%d education=%d",
        len(extraction.skills),
        len(extraction.experience),
        len(extraction.education),
    )
    return extraction
