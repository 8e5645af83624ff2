"""Extraction orchestrator: LLM strategy first, heuristic strategy as fallback.

Both strategies honour the same JobExtraction / ResumeExtraction contract,
so the scoring engine never knows which one produced its input.
"""

import logging
from typing import Literal

from models.schemas.extraction import JobExtraction, ResumeExtraction
from services import heuristic_extractor, llm_extractor
from services.llm_client import LLMConfig, LLMError, LLMNotConfiguredError

logger = logging.getLogger(__name__)

ExtractionMethod = Literal["llm", "heuristic"]


def _log_fallback(kind: str, error: LLMError) -> None:
    if isinstance(error, LLMNotConfiguredError):
        logger.warning(
            "AI provider not configured, using heuristic %s parsing. Set "
            "GEMINI_API_KEY, OPENAI_API_KEY or GROQ_API_KEY to enable AI analysis.",
            kind,
        )
    else:
        logger.error("AI %s analysis failed, using heuristic fallback: %s", kind, error)


async def extract_job(
    job_text: str, config: LLMConfig | None
) -> tuple[JobExtraction, ExtractionMethod]:
    try:
        extraction = await llm_extractor.extract_job(job_text, config)
    except LLMError as e:
        _log_fallback("job", e)
        return heuristic_extractor.extract_job(job_text), "heuristic"

    updates: dict = {}
    if not extraction.title.strip():
        updates["title"] = heuristic_extractor.DEFAULT_JOB_TITLE
    if not extraction.description.strip():
        updates["description"] = job_text
    return extraction.model_copy(update=updates), "llm"


async def extract_resume(
    resume_text: str, config: LLMConfig | None
) -> tuple[ResumeExtraction, ExtractionMethod]:
    try:
        extraction = await llm_extractor.extract_resume(resume_text, config)
    except LLMError as e:
        _log_fallback("resume", e)
        return heuristic_extractor.extract_resume(resume_text), "heuristic"
    return extraction, "llm"
