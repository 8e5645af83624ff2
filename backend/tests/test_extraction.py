from unittest.mock import AsyncMock, patch

import pytest

from models.schemas.extraction import JobExtraction, ResumeExtraction
from services import extraction
from services.llm_client import LLMConfig, LLMResponseError, parse_json_response

CONFIG = LLMConfig(provider="openai", api_key="test-key", model="gpt-4.1-nano")
JOB_TEXT = "Job Title: Python Developer\nWe use Python and Docker every day."
RESUME_TEXT = "Python Developer\nAcme\nPython, Docker"


@pytest.mark.asyncio
async def test_job_falls_back_without_provider():
    job, method = await extraction.extract_job(JOB_TEXT, None)
    assert method == "heuristic"
    assert job.title == "Python Developer"
    assert job.required_skills == ["Python", "Docker"]


@pytest.mark.asyncio
async def test_resume_falls_back_without_provider():
    resume, method = await extraction.extract_resume(RESUME_TEXT, None)
    assert method == "heuristic"
    assert resume.skills == ["Python", "Docker"]


@pytest.mark.asyncio
async def test_job_falls_back_on_provider_failure():
    failing = AsyncMock(side_effect=LLMResponseError("bad json"))
    with patch("services.llm_extractor.extract_job", new=failing):
        job, method = await extraction.extract_job(JOB_TEXT, CONFIG)
    assert method == "heuristic"
    assert job.description == JOB_TEXT


@pytest.mark.asyncio
async def test_resume_falls_back_on_provider_failure():
    failing = AsyncMock(side_effect=LLMResponseError("bad json"))
    with patch("services.llm_extractor.extract_resume", new=failing):
        _, method = await extraction.extract_resume(RESUME_TEXT, CONFIG)
    assert method == "heuristic"


@pytest.mark.asyncio
async def test_llm_job_blank_fields_filled():
    result = JobExtraction(title="  ", required_skills=["Python"])
    with patch("services.llm_extractor.extract_job", new=AsyncMock(return_value=result)):
        job, method = await extraction.extract_job(JOB_TEXT, CONFIG)
    assert method == "llm"
    assert job.title == "Job Position"
    assert job.description == JOB_TEXT
    assert job.required_skills == ["Python"]


@pytest.mark.asyncio
async def test_llm_resume_used_as_is():
    result = ResumeExtraction(skills=["Rust"])
    with patch("services.llm_extractor.extract_resume", new=AsyncMock(return_value=result)):
        resume, method = await extraction.extract_resume(RESUME_TEXT, CONFIG)
    assert method == "llm"
    assert resume.skills == ["Rust"]


@pytest.mark.asyncio
async def test_infinite_keyword_frequency_is_repaired():
    reply = parse_json_response(
        '{"title": "Data Engineer", "keywords": [{"word": "python", "frequency": Infinity}]}'
    )
    with patch("services.llm_client.generate_json", new=AsyncMock(return_value=reply)):
        job, method = await extraction.extract_job(JOB_TEXT, CONFIG)
    assert method == "llm"
    assert job.title == "Data Engineer"
    assert [(k.word, k.frequency) for k in job.keywords] == [("python", 1)]
