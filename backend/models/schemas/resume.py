"""Parsed resume shape consumed by the scoring engine."""

from pydantic import BaseModel, ConfigDict


class ExperienceEntry(BaseModel):
    """A single work experience entry."""
    title: str = ""
    company: str = ""
    start_date: str | None = None
    end_date: str | None = None  # None while the position is current
    description: str | None = None


class EducationEntry(BaseModel):
    """A single education entry."""
    degree: str = ""
    institution: str = ""
    field: str | None = None
    graduation_date: str | None = None


class Resume(BaseModel):
    """Read-only snapshot of a parsed resume."""
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    text: str = ""
