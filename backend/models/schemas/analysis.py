"""Scoring engine output: breakdown, gaps and recommendations."""

from typing import Literal

from pydantic import BaseModel, Field

GapType = Literal["skill", "keyword", "experience", "education"]
Importance = Literal["high", "medium", "low"]


class ScoreComponent(BaseModel):
    score: int = Field(default=0, ge=0, le=100)
    weight: float = 0.0


class ScoreBreakdown(BaseModel):
    """The four weighted sub-scores behind the overall score."""
    skills: ScoreComponent = ScoreComponent()
    experience: ScoreComponent = ScoreComponent()
    keywords: ScoreComponent = ScoreComponent()
    education: ScoreComponent = ScoreComponent()


class Gap(BaseModel):
    """A job requirement not evidenced in the resume.

    The experience and education types are reserved; no rule emits them yet.
    """
    type: GapType
    missing: str
    frequency: int | None = None  # only set for keyword gaps
    importance: Importance


class Recommendation(BaseModel):
    section: str
    current: str
    suggested: str


class Analysis(BaseModel):
    overall_score: int = Field(default=0, ge=0, le=100)
    breakdown: ScoreBreakdown = ScoreBreakdown()
    gaps: list[Gap] = []
    recommendations: list[Recommendation] = []
