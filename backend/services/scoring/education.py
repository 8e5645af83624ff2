"""Education Relevance Scorer."""

from collections.abc import Sequence

from models.schemas.resume import EducationEntry
from services.scoring.matching import normalize_text, round_half_up, tokens_longer_than

NEUTRAL_SCORE = 50
MIN_TOKEN_CHARS = 3  # tokens must be longer than this


def education_score(education: Sequence[EducationEntry], job_description: str) -> int:
    """Best single-entry relevance, 0-100.

    Relevance is the share of degree + field tokens found in the job text.
    An empty list, or an entry with no usable tokens, is neutral (50).
    """
    if not education:
        return NEUTRAL_SCORE

    job_tokens = set(tokens_longer_than(normalize_text(job_description), MIN_TOKEN_CHARS))
    best = 0.0
    for entry in education:
        entry_tokens = tokens_longer_than(
            normalize_text(f"{entry.degree} {entry.field or ''}"), MIN_TOKEN_CHARS
        )
        if entry_tokens:
            common = sum(1 for t in entry_tokens if t in job_tokens)
            relevance = common / len(entry_tokens) * 100
        else:
            relevance = NEUTRAL_SCORE
        best = max(best, relevance)

    return round_half_up(best)
