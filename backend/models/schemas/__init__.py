"""Data contracts shared by the extraction layer and the scoring engine."""

from models.schemas.analysis import (
    Analysis,
    Gap,
    Recommendation,
    ScoreBreakdown,
    ScoreComponent,
)
from models.schemas.extraction import JobExtraction, ResumeExtraction
from models.schemas.job import Job, Keyword
from models.schemas.resume import EducationEntry, ExperienceEntry, Resume

__all__ = [
    "Analysis",
    "EducationEntry",
    "ExperienceEntry",
    "Gap",
    "Job",
    "JobExtraction",
    "Keyword",
    "Recommendation",
    "Resume",
    "ResumeExtraction",
    "ScoreBreakdown",
    "ScoreComponent",
]
