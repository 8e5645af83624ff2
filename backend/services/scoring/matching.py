"""Normalization and containment primitives shared by every scorer.

Matching is plain bidirectional substring containment on normalized text,
not token or edit-distance similarity: "react" matches "react.js" and
"node" matches "node.js", but "postgres" never matches "postgresql db" by
fuzz ratio. Golden scores depend on this rule staying exactly as is.
"""

import math
import re
from collections.abc import Iterable

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_skill(skill: str) -> str:
    """Lower-case, trim and collapse internal whitespace runs."""
    return _WHITESPACE_RE.sub(" ", skill.lower().strip())


def normalize_text(text: str) -> str:
    """Lower-case and trim. Internal whitespace is left alone."""
    return text.lower().strip()


def contains_either_way(a: str, b: str) -> bool:
    return a in b or b in a


def skill_is_matched(job_skill: str, normalized_resume_skills: Iterable[str]) -> bool:
    """True if any normalized resume skill contains, or is contained in, job_skill."""
    wanted = normalize_skill(job_skill)
    return any(contains_either_way(have, wanted) for have in normalized_resume_skills)


def tokens_longer_than(text: str, min_exclusive: int) -> list[str]:
    """Whitespace tokens of text with more than min_exclusive characters."""
    return [w for w in text.split() if len(w) > min_exclusive]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3).

    Python's round() uses banker's rounding, which would shift golden scores.
    """
    return int(math.floor(value + 0.5))
