"""Skill Matcher: required/preferred skill coverage score."""

import logging
from collections.abc import Sequence

from services.scoring.matching import normalize_skill, round_half_up, skill_is_matched

logger = logging.getLogger(__name__)

REQUIRED_WEIGHT = 0.7
PREFERRED_WEIGHT = 0.3


def _match_pct(job_skills: Sequence[str], normalized_resume: list[str]) -> float:
    matched = sum(1 for s in job_skills if skill_is_matched(s, normalized_resume))
    return matched / len(job_skills) * 100


def match_score(
    resume_skills: Sequence[str],
    required_skills: Sequence[str],
    preferred_skills: Sequence[str],
) -> int:
    """Score 0-100 for how many job skills the resume skills cover.

    - No required and no preferred skills: 100.
    - Only one list non-empty: that list's match percentage.
    - Both non-empty: 70% required + 30% preferred.
    """
    if not required_skills and not preferred_skills:
        return 100

    normalized_resume = [normalize_skill(s) for s in resume_skills]

    required_pct = _match_pct(required_skills, normalized_resume) if required_skills else 0.0
    preferred_pct = _match_pct(preferred_skills, normalized_resume) if preferred_skills else 0.0
    logger.debug("Skill match: required=%.2f%% preferred=%.2f%%", required_pct, preferred_pct)

    if not required_skills:
        return round_half_up(preferred_pct)
    if not preferred_skills:
        return round_half_up(required_pct)
    return round_half_up(required_pct * REQUIRED_WEIGHT + preferred_pct * PREFERRED_WEIGHT)
