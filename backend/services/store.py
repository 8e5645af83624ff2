"""Record store for resumes, jobs and analyses.

In-memory by default; when a storage path is configured every write is
persisted to a JSON file (atomic replace) and the file is loaded at start.
Ids and timestamps are assigned here, never by the scoring engine.
Thread-safe via threading.Lock.
"""

import json
import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from config import settings
from models.records import AnalysisRecord, JobRecord, ResumeRecord
from models.schemas.analysis import Analysis
from models.schemas.extraction import JobExtraction, ResumeExtraction

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

_KINDS: dict[str, type[BaseModel]] = {
    "resumes": ResumeRecord,
    "jobs": JobRecord,
    "analyses": AnalysisRecord,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """Thread-safe store with optional JSON-file persistence."""

    def __init__(self, storage_path: Path | None = None) -> None:
        self._path = storage_path
        self._lock = threading.Lock()
        self._records: dict[str, dict[str, Any]] = {kind: {} for kind in _KINDS}
        if self._path is not None:
            self._load()

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_resume(
        self,
        user_id: str,
        text: str,
        extraction: ResumeExtraction,
        file_url: str | None = None,
        file_name: str | None = None,
        file_size: int | None = None,
    ) -> ResumeRecord:
        now = _now()
        record = ResumeRecord(
            id=str(uuid.uuid4()),
            user_id=user_id,
            text=text,
            skills=extraction.skills,
            experience=extraction.experience,
            education=extraction.education,
            file_url=file_url,
            file_name=file_name,
            file_size=file_size,
            created_at=now,
            updated_at=now,
        )
        return self._put("resumes", record)

    def create_job(
        self,
        user_id: str,
        extraction: JobExtraction,
        url: str | None = None,
    ) -> JobRecord:
        now = _now()
        record = JobRecord(
            id=str(uuid.uuid4()),
            user_id=user_id,
            title=extraction.title,
            company=extraction.company,
            url=url,
            description=extraction.description,
            required_skills=extraction.required_skills,
            preferred_skills=extraction.preferred_skills,
            keywords=extraction.keywords,
            years_of_experience=extraction.years_of_experience,
            created_at=now,
            updated_at=now,
        )
        return self._put("jobs", record)

    def create_analysis(
        self,
        user_id: str,
        resume_id: str,
        job_id: str,
        analysis: Analysis,
    ) -> AnalysisRecord:
        now = _now()
        record = AnalysisRecord(
            id=str(uuid.uuid4()),
            user_id=user_id,
            resume_id=resume_id,
            job_id=job_id,
            overall_score=analysis.overall_score,
            breakdown=analysis.breakdown,
            gaps=analysis.gaps,
            recommendations=analysis.recommendations,
            created_at=now,
            updated_at=now,
        )
        return self._put("analyses", record)

    def _put(self, kind: str, record: R) -> R:
        with self._lock:
            self._records[kind][record.id] = record
            if self._path is not None:
                try:
                    self._save()
                except OSError:
                    # keep memory and disk in step
                    del self._records[kind][record.id]
                    raise
        logger.info("Stored %s record id=%s", kind, record.id)
        return record

    # ------------------------------------------------------------------
    # Read operations (no lock needed - dict reads are thread-safe in CPython)
    # ------------------------------------------------------------------

    def get_resume(self, resume_id: str) -> ResumeRecord | None:
        return self._records["resumes"].get(resume_id)

    def get_job(self, job_id: str) -> JobRecord | None:
        return self._records["jobs"].get(job_id)

    def get_analysis(self, analysis_id: str) -> AnalysisRecord | None:
        return self._records["analyses"].get(analysis_id)

    def count(self, kind: str) -> int:
        return len(self._records[kind])

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------

    def _load(self) -> None:
        if not self._path.exists():
            logger.info("No store file found at %s - starting empty", self._path)
            return
        try:
            data = json.loads(self._path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load store from %s: %s", self._path, e)
            return
        try:
            records = {
                kind: {k: model.model_validate(v) for k, v in data.get(kind, {}).items()}
                for kind, model in _KINDS.items()
            }
        except (AttributeError, ValidationError) as e:
            logger.error("Store file %s has an unexpected layout: %s", self._path, e)
            return
        self._records = records
        logger.info(
            "Store loaded: %d resumes, %d jobs, %d analyses",
            self.count("resumes"), self.count("jobs"), self.count("analyses"),
        )

    def _save(self) -> None:
        """Atomically write the store to disk. Caller must hold self._lock."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        data = {
            kind: {k: v.model_dump(mode="json") for k, v in records.items()}
            for kind, records in self._records.items()
        }
        tmp.write_text(json.dumps(data, indent=2))
        tmp.replace(self._path)


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_store: RecordStore | None = None


def get_store() -> RecordStore:
    global _store
    if _store is None:
        _store = RecordStore(Path(settings.store_path) if settings.store_path else None)
    return _store


def reset_store() -> None:
    """Drop the singleton. Useful for testing."""
    global _store
    _store = None
