"""Compatibility scoring engine.

Flow:
    Resume + Job
      ├─ match_score        → skills     (0.40)
      ├─ experience_score   → experience (0.30)
      ├─ keyword_score      → keywords   (0.20)
      ├─ education_score    → education  (0.10)
      ├─ identify_gaps      → gaps
      │        ↓
      └─ generate_recommendations(resume, gaps) → recommendations

The four scorers share no state and may run in any order. Each returns an
already-rounded integer; the overall score is rounded again after weighting.
That double rounding is part of the expected output and must stay.
"""

import logging

from models.schemas.analysis import Analysis, ScoreBreakdown, ScoreComponent
from models.schemas.job import Job
from models.schemas.resume import Resume
from services.scoring.education import education_score
from services.scoring.experience import experience_score
from services.scoring.gaps import identify_gaps
from services.scoring.keywords import keyword_score
from services.scoring.matching import round_half_up
from services.scoring.recommendations import generate_recommendations
from services.scoring.skills import match_score

logger = logging.getLogger(__name__)

# Component weights (sum to 1.0)
W_SKILLS = 0.40
W_EXPERIENCE = 0.30
W_KEYWORDS = 0.20
W_EDUCATION = 0.10

WEIGHTS: dict[str, float] = {
    "skills": W_SKILLS,
    "experience": W_EXPERIENCE,
    "keywords": W_KEYWORDS,
    "education": W_EDUCATION,
}


def compute_overall(skills: int, experience: int, keywords: int, education: int) -> int:
    """Weighted sum of the rounded component scores, rounded half up."""
    return round_half_up(
        skills * W_SKILLS
        + experience * W_EXPERIENCE
        + keywords * W_KEYWORDS
        + education * W_EDUCATION
    )


def score_breakdown(resume: Resume, job: Job) -> ScoreBreakdown:
    return ScoreBreakdown(
        skills=ScoreComponent(
            score=match_score(resume.skills, job.required_skills, job.preferred_skills),
            weight=W_SKILLS,
        ),
        experience=ScoreComponent(
            score=experience_score(resume.experience, job.required_skills, job.description),
            weight=W_EXPERIENCE,
        ),
        keywords=ScoreComponent(
            score=keyword_score(resume.text, job.keywords),
            weight=W_KEYWORDS,
        ),
        education=ScoreComponent(
            score=education_score(resume.education, job.description),
            weight=W_EDUCATION,
        ),
    )


def analyze(resume: Resume, job: Job) -> Analysis:
    """Score a resume against a job. Pure and deterministic."""
    breakdown = score_breakdown(resume, job)
    overall = compute_overall(
        breakdown.skills.score,
        breakdown.experience.score,
        breakdown.keywords.score,
        breakdown.education.score,
    )
    logger.debug(
        "Breakdown: skills=%d experience=%d keywords=%d education=%d",
        breakdown.skills.score,
        breakdown.experience.score,
        breakdown.keywords.score,
        breakdown.education.score,
    )

    gaps = identify_gaps(resume, job)
    recommendations = generate_recommendations(resume, gaps)
    logger.info(
        "Compatibility score %d (%d gaps, %d recommendations)",
        overall, len(gaps), len(recommendations),
    )

    return Analysis(
        overall_score=overall,
        breakdown=breakdown,
        gaps=gaps,
        recommendations=recommendations,
    )
