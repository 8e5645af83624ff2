"""Analysis service: extraction, persistence and compatibility scoring.

Flow:
    job text ──► extraction.extract_job ──► store.create_job
    resume text ─► extraction.extract_resume ─► store.create_resume
    (resume_id, job_id) ─► ownership checks ─► scoring.engine.analyze ─► store.create_analysis
"""

import logging
from collections.abc import AsyncIterator

from models.records import AnalysisRecord, JobRecord, ResumeRecord
from models.schemas.analysis import Analysis
from models.schemas.extraction import JobExtraction
from models.schemas.job import Job
from models.schemas.resume import Resume
from services import extraction, heuristic_extractor, llm_client, prompt_builder
from services.errors import (
    InvalidRequestError,
    RecordNotFoundError,
    RecordOwnershipError,
    StreamingUnavailableError,
)
from services.llm_client import LLMConfig
from services.scoring import engine
from services.store import RecordStore

logger = logging.getLogger(__name__)


def _validate_job_input(url: str | None, text: str | None) -> None:
    if not (url or text):
        raise InvalidRequestError("Either url or text must be provided")
    if url and text:
        raise InvalidRequestError("Provide either url or text, not both")


async def analyze_job(
    store: RecordStore,
    user_id: str,
    config: LLMConfig | None,
    url: str | None = None,
    text: str | None = None,
) -> JobRecord:
    """Extract and store a job posting submitted as text or by URL."""
    _validate_job_input(url, text)

    if not text:
        # URL-only submissions are recorded as-is; the page is not fetched
        logger.info("Job recorded from url only: %s", url)
        job_extraction = JobExtraction(title=heuristic_extractor.DEFAULT_JOB_TITLE)
        return store.create_job(user_id, job_extraction, url=url)

    job_extraction, method = await extraction.extract_job(text, config)
    logger.info(
        "Job analyzed via %s: title=%r required=%d preferred=%d keywords=%d",
        method,
        job_extraction.title,
        len(job_extraction.required_skills),
        len(job_extraction.preferred_skills),
        len(job_extraction.keywords),
    )
    return store.create_job(user_id, job_extraction, url=url)


async def analyze_resume(
    store: RecordStore,
    user_id: str,
    config: LLMConfig | None,
    text: str,
    file_url: str | None = None,
    file_name: str | None = None,
    file_size: int | None = None,
) -> ResumeRecord:
    """Extract and store a resume."""
    if not text or not text.strip():
        raise InvalidRequestError("Resume text is required")

    resume_extraction, method = await extraction.extract_resume(text, config)
    logger.info(
        "Resume analyzed via %s: skills=%d experience=%d education=%d",
        method,
        len(resume_extraction.skills),
        len(resume_extraction.experience),
        len(resume_extraction.education),
    )
    return store.create_resume(
        user_id,
        text,
        resume_extraction,
        file_url=file_url,
        file_name=file_name,
        file_size=file_size,
    )


def analyze_compatibility(
    store: RecordStore,
    user_id: str,
    resume_id: str,
    job_id: str,
) -> AnalysisRecord:
    """Score a stored resume against a stored job, both owned by user_id."""
    resume = store.get_resume(resume_id)
    if resume is None:
        raise RecordNotFoundError(f"Resume with ID {resume_id} not found")
    if resume.user_id != user_id:
        raise RecordOwnershipError("Resume does not belong to the current user")

    job = store.get_job(job_id)
    if job is None:
        raise RecordNotFoundError(f"Job with ID {job_id} not found")
    if job.user_id != user_id:
        raise RecordOwnershipError("Job does not belong to the current user")

    analysis = engine.analyze(resume.to_resume(), job.to_job())
    return store.create_analysis(user_id, resume_id, job_id, analysis)


async def quick_analyze(
    resume_text: str,
    job_description: str,
    config: LLMConfig | None,
) -> Analysis:
    """Extract both texts and score them without storing anything."""
    if not resume_text.strip():
        raise InvalidRequestError("Resume text is required")
    if not job_description.strip():
        raise InvalidRequestError("Job description is required")

    job_extraction, _ = await extraction.extract_job(job_description, config)
    resume_extraction, _ = await extraction.extract_resume(resume_text, config)

    resume = Resume(
        skills=resume_extraction.skills,
        experience=resume_extraction.experience,
        education=resume_extraction.education,
        text=resume_text,
    )
    job = Job(
        required_skills=job_extraction.required_skills,
        preferred_skills=job_extraction.preferred_skills,
        keywords=job_extraction.keywords,
        description=job_extraction.description,
    )
    return engine.analyze(resume, job)


def stream_job(text: str | None, url: str | None, config: LLMConfig | None) -> AsyncIterator[str]:
    """Raw LLM text stream for a job extraction, for progressive rendering."""
    _validate_job_input(url, text)
    if not text:
        raise InvalidRequestError("Streaming requires job description text")
    if config is None:
        raise StreamingUnavailableError("Failed to initialize streaming: no AI provider configured")
    return llm_client.stream_text(prompt_builder.build_job_prompt(text), config)


def stream_resume(text: str, config: LLMConfig | None) -> AsyncIterator[str]:
    """Raw LLM text stream for a resume extraction."""
    if not text or not text.strip():
        raise InvalidRequestError("Resume text is required")
    if config is None:
        raise StreamingUnavailableError("Failed to initialize streaming: no AI provider configured")
    return llm_client.stream_text(prompt_builder.build_resume_prompt(text), config)


def get_job(store: RecordStore, job_id: str) -> JobRecord:
    job = store.get_job(job_id)
    if job is None:
        raise RecordNotFoundError(f"Job with ID {job_id} not found")
    return job


def get_resume(store: RecordStore, resume_id: str) -> ResumeRecord:
    resume = store.get_resume(resume_id)
    if resume is None:
        raise RecordNotFoundError(f"Resume with ID {resume_id} not found")
    return resume


def get_analysis(store: RecordStore, analysis_id: str) -> AnalysisRecord:
    analysis = store.get_analysis(analysis_id)
    if analysis is None:
        raise RecordNotFoundError(f"Analysis with ID {analysis_id} not found")
    return analysis
