"""Keyword Coverage Scorer."""

import logging
from collections.abc import Sequence

from models.schemas.job import Keyword
from services.scoring.matching import normalize_text, round_half_up

logger = logging.getLogger(__name__)


def keyword_in_text(keyword: Keyword, normalized_text: str) -> bool:
    return normalize_text(keyword.word) in normalized_text


def keyword_score(resume_text: str, job_keywords: Sequence[Keyword]) -> int:
    """Score 0-100: half from matched keyword count, half from matched frequency.

    An empty keyword list is a vacuous requirement and scores 100. When every
    frequency is zero the frequency half contributes nothing.
    """
    if not job_keywords:
        return 100

    normalized_resume = normalize_text(resume_text)
    matched_count = 0
    matched_frequency = 0
    for kw in job_keywords:
        if keyword_in_text(kw, normalized_resume):
            matched_count += 1
            matched_frequency += kw.frequency

    total_frequency = sum(kw.frequency for kw in job_keywords)
    count_score = matched_count / len(job_keywords) * 50
    frequency_score = matched_frequency / total_frequency * 50 if total_frequency > 0 else 0
    logger.debug(
        "Keywords: %d/%d matched, frequency %d/%d",
        matched_count, len(job_keywords), matched_frequency, total_frequency,
    )
    return round_half_up(count_score + frequency_score)
