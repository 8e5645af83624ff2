"""Extraction contracts: what an extractor (LLM or heuristic) must return."""

from pydantic import BaseModel

from models.schemas.job import Keyword
from models.schemas.resume import EducationEntry, ExperienceEntry


class JobExtraction(BaseModel):
    """Structured fields pulled out of a raw job description."""
    title: str = ""
    company: str | None = None
    required_skills: list[str] = []
    preferred_skills: list[str] = []
    keywords: list[Keyword] = []
    years_of_experience: float | None = None
    description: str = ""


class ResumeExtraction(BaseModel):
    """Structured fields pulled out of raw resume text."""
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
