"""Experience Relevance Scorer."""

import logging
from collections.abc import Sequence

from models.schemas.resume import ExperienceEntry
from services.scoring.matching import normalize_text, round_half_up, tokens_longer_than

logger = logging.getLogger(__name__)

SKILL_COMPONENT_MAX = 50
OVERLAP_COMPONENT_MAX = 50
MIN_TOKEN_CHARS = 4  # tokens must be longer than this


def entry_relevance(
    entry: ExperienceEntry,
    required_skills: Sequence[str],
    job_tokens: set[str],
) -> float:
    """Relevance 0-100 of a single entry.

    Up to 50 for required skills mentioned in title + description, up to 50
    for the share of the entry's long tokens that also appear in the job text.
    Repeated entry tokens count each time.
    """
    entry_text = normalize_text(f"{entry.title} {entry.description or ''}")
    relevance = 0.0

    if required_skills:
        mentioned = sum(1 for s in required_skills if normalize_text(s) in entry_text)
        relevance += mentioned / len(required_skills) * SKILL_COMPONENT_MAX

    entry_tokens = tokens_longer_than(entry_text, MIN_TOKEN_CHARS)
    common = sum(1 for t in entry_tokens if t in job_tokens)
    relevance += min(common / max(len(entry_tokens), 1) * OVERLAP_COMPONENT_MAX, OVERLAP_COMPONENT_MAX)

    return min(relevance, 100)


def experience_score(
    experience: Sequence[ExperienceEntry],
    required_skills: Sequence[str],
    job_description: str,
) -> int:
    """Mean entry relevance, 0-100. No entries means no evidence: 0."""
    if not experience:
        return 0

    job_tokens = set(tokens_longer_than(normalize_text(job_description), MIN_TOKEN_CHARS))
    total = sum(entry_relevance(e, required_skills, job_tokens) for e in experience)
    return round_half_up(total / len(experience))
