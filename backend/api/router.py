import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile
from fastapi.responses import StreamingResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_llm_config, get_record_store, get_user_id
from config import settings
from models.records import AnalysisRecord, JobRecord, ResumeRecord
from models.requests import (
    AnalyzeJobRequest,
    CreateAnalysisRequest,
    CreateResumeRequest,
    QuickAnalyzeRequest,
    StreamResumeRequest,
)
from models.responses import HealthResponse
from models.schemas.analysis import Analysis
from services import analysis_service, pdf_parser
from services.llm_client import LLMConfig
from services.store import RecordStore

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

_STREAM_HEADERS = {
    "Cache-Control": "no-cache, no-transform",
    "X-Accel-Buffering": "no",
}


async def _forward(chunks: AsyncIterator[str]) -> AsyncIterator[str]:
    count = 0
    try:
        async for chunk in chunks:
            count += 1
            yield chunk
    except Exception:
        logger.exception("Stream aborted after %d chunks", count)
        raise
    logger.info("Stream finished: %d chunks sent", count)


def _stream(chunks: AsyncIterator[str]) -> StreamingResponse:
    return StreamingResponse(
        _forward(chunks),
        media_type="text/plain; charset=utf-8",
        headers=_STREAM_HEADERS,
    )


@router.get("/health", response_model=HealthResponse)
async def health(config: LLMConfig | None = Depends(get_llm_config)):
    return HealthResponse(llm_provider=config.provider if config else None)


# --- Jobs ---

@router.post("/analysis/job", response_model=JobRecord, status_code=201)
@limiter.limit(settings.rate_limit)
async def analyze_job(
    request: Request,
    body: AnalyzeJobRequest,
    user_id: str = Depends(get_user_id),
    store: RecordStore = Depends(get_record_store),
    config: LLMConfig | None = Depends(get_llm_config),
):
    if body.text and len(body.text) > settings.max_job_text_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_text_chars} chars)",
        )
    return await analysis_service.analyze_job(
        store, user_id, config, url=body.url, text=body.text
    )


@router.post("/analysis/job/stream")
@limiter.limit(settings.rate_limit)
async def stream_job(
    request: Request,
    body: AnalyzeJobRequest,
    config: LLMConfig | None = Depends(get_llm_config),
):
    return _stream(analysis_service.stream_job(body.text, body.url, config))


@router.get("/analysis/job/{job_id}", response_model=JobRecord)
async def get_job(job_id: str, store: RecordStore = Depends(get_record_store)):
    return analysis_service.get_job(store, job_id)


# --- Resumes ---

@router.post("/analysis/resume", response_model=ResumeRecord, status_code=201)
@limiter.limit(settings.rate_limit)
async def analyze_resume(
    request: Request,
    body: CreateResumeRequest,
    user_id: str = Depends(get_user_id),
    store: RecordStore = Depends(get_record_store),
    config: LLMConfig | None = Depends(get_llm_config),
):
    return await analysis_service.analyze_resume(
        store,
        user_id,
        config,
        body.text,
        file_url=body.file_url,
        file_name=body.file_name,
    )


@router.post("/analysis/resume/upload", response_model=ResumeRecord, status_code=201)
@limiter.limit(settings.rate_limit)
async def upload_resume(
    request: Request,
    resume_file: UploadFile = File(...),
    user_id: str = Depends(get_user_id),
    store: RecordStore = Depends(get_record_store),
    config: LLMConfig | None = Depends(get_llm_config),
):
    filename = resume_file.filename or ""
    if not filename.lower().endswith((".pdf", ".docx")):
        raise HTTPException(status_code=400, detail="Only PDF and DOCX files are accepted")

    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    try:
        resume_text = pdf_parser.extract_resume_text(filename, content)
    except Exception:
        logger.warning("Could not parse uploaded resume %r", filename, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not parse resume file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from file")
    if len(resume_text) > settings.max_resume_text_chars:
        raise HTTPException(status_code=400, detail="Resume text too long")

    return await analysis_service.analyze_resume(
        store,
        user_id,
        config,
        resume_text,
        file_name=filename,
        file_size=len(content),
    )


@router.post("/analysis/resume/stream")
@limiter.limit(settings.rate_limit)
async def stream_resume(
    request: Request,
    body: StreamResumeRequest,
    config: LLMConfig | None = Depends(get_llm_config),
):
    return _stream(analysis_service.stream_resume(body.text, config))


@router.get("/analysis/resume/{resume_id}", response_model=ResumeRecord)
async def get_resume(resume_id: str, store: RecordStore = Depends(get_record_store)):
    return analysis_service.get_resume(store, resume_id)


# --- Compatibility ---

@router.post("/analysis/compatibility", response_model=AnalysisRecord, status_code=201)
@limiter.limit(settings.rate_limit)
async def analyze_compatibility(
    request: Request,
    body: CreateAnalysisRequest,
    user_id: str = Depends(get_user_id),
    store: RecordStore = Depends(get_record_store),
):
    return analysis_service.analyze_compatibility(store, user_id, body.resume_id, body.job_id)


@router.get("/analysis/compatibility/{analysis_id}", response_model=AnalysisRecord)
async def get_analysis(analysis_id: str, store: RecordStore = Depends(get_record_store)):
    return analysis_service.get_analysis(store, analysis_id)


@router.post("/analysis/quick", response_model=Analysis)
@limiter.limit(settings.rate_limit)
async def analyze_quick(
    request: Request,
    body: QuickAnalyzeRequest,
    config: LLMConfig | None = Depends(get_llm_config),
):
    return await analysis_service.quick_analyze(body.resume_text, body.job_description, config)
