"""Parsed job posting shape consumed by the scoring engine."""

from pydantic import BaseModel, ConfigDict, Field


class Keyword(BaseModel):
    """A job keyword and how often it occurs in the posting."""
    word: str
    frequency: int = Field(default=1, ge=0)


class Job(BaseModel):
    """Read-only snapshot of a parsed job posting.

    Keywords are not deduplicated by word; callers own that.
    """
    model_config = ConfigDict(frozen=True)

    required_skills: list[str] = []
    preferred_skills: list[str] = []
    keywords: list[Keyword] = []
    description: str = ""
