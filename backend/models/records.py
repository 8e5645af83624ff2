"""Persisted records: engine shapes plus ownership and bookkeeping fields."""

from datetime import datetime

from models.schemas.analysis import Analysis
from models.schemas.job import Job
from models.schemas.resume import Resume


class ResumeRecord(Resume):
    id: str
    user_id: str
    file_url: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    created_at: datetime
    updated_at: datetime

    def to_resume(self) -> Resume:
        return Resume(
            skills=self.skills,
            experience=self.experience,
            education=self.education,
            text=self.text,
        )


class JobRecord(Job):
    id: str
    user_id: str
    title: str = "Job Position"
    company: str | None = None
    url: str | None = None
    years_of_experience: float | None = None
    created_at: datetime
    updated_at: datetime

    def to_job(self) -> Job:
        return Job(
            required_skills=self.required_skills,
            preferred_skills=self.preferred_skills,
            keywords=self.keywords,
            description=self.description,
        )


class AnalysisRecord(Analysis):
    id: str
    user_id: str
    resume_id: str
    job_id: str
    created_at: datetime
    updated_at: datetime
