"""Gap Identifier: job requirements the resume does not evidence."""

from models.schemas.analysis import Gap, Importance
from models.schemas.job import Job
from models.schemas.resume import Resume
from services.scoring.keywords import keyword_in_text
from services.scoring.matching import normalize_skill, normalize_text, skill_is_matched


def keyword_importance(frequency: int) -> Importance:
    if frequency >= 5:
        return "high"
    if frequency >= 2:
        return "medium"
    return "low"


def identify_gaps(resume: Resume, job: Job) -> list[Gap]:
    """List unmet requirements in job order.

    Missing required skills (high) come first, then missing preferred skills
    (medium), then keywords absent from the resume text.
    """
    normalized_skills = [normalize_skill(s) for s in resume.skills]
    gaps: list[Gap] = []

    for skill in job.required_skills:
        if not skill_is_matched(skill, normalized_skills):
            gaps.append(Gap(type="skill", missing=skill, importance="high"))

    for skill in job.preferred_skills:
        if not skill_is_matched(skill, normalized_skills):
            gaps.append(Gap(type="skill", missing=skill, importance="medium"))

    normalized_text = normalize_text(resume.text)
    for kw in job.keywords:
        if not keyword_in_text(kw, normalized_text):
            gaps.append(
                Gap(
                    type="keyword",
                    missing=kw.word,
                    frequency=kw.frequency,
                    importance=keyword_importance(kw.frequency),
                )
            )

    return gaps
