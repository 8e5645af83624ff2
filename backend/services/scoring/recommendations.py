"""Recommendation Generator: fixed rules over gaps and resume shape."""

from collections.abc import Sequence

from models.schemas.analysis import Gap, Recommendation
from models.schemas.resume import Resume

MAX_NAMED_GAPS = 3
KEYWORD_FREQUENCY_THRESHOLD = 3
DETAILED_DESCRIPTION_CHARS = 50


def _missing_skills(gaps: Sequence[Gap]) -> Recommendation | None:
    critical = [g for g in gaps if g.type == "skill" and g.importance == "high"][:MAX_NAMED_GAPS]
    if not critical:
        return None
    return Recommendation(
        section="skills",
        current=f"Missing critical skills: {', '.join(g.missing for g in critical)}",
        suggested=(
            "Consider adding these required skills to your resume. If you have "
            "experience with these technologies, highlight them in your experience section."
        ),
    )


def _missing_keywords(gaps: Sequence[Gap]) -> Recommendation | None:
    frequent = [
        g for g in gaps
        if g.type == "keyword"
        and g.frequency is not None
        and g.frequency >= KEYWORD_FREQUENCY_THRESHOLD
    ][:MAX_NAMED_GAPS]
    if not frequent:
        return None
    return Recommendation(
        section="keywords",
        current=f"Missing important keywords: {', '.join(g.missing for g in frequent)}",
        suggested=(
            "Incorporate these keywords naturally into your resume, especially "
            "in your experience descriptions."
        ),
    )


def _experience_detail(resume: Resume) -> Recommendation | None:
    if not resume.experience:
        return Recommendation(
            section="experience",
            current="No professional experience listed",
            suggested=(
                "Add your professional experience with detailed descriptions "
                "of your achievements and responsibilities."
            ),
        )
    detailed = any(
        e.description and len(e.description) > DETAILED_DESCRIPTION_CHARS
        for e in resume.experience
    )
    if detailed:
        return None
    return Recommendation(
        section="experience",
        current="Experience entries lack detailed descriptions",
        suggested=(
            "Expand your experience descriptions to include specific achievements, "
            "technologies used, and impact you made. Use action verbs and quantifiable results."
        ),
    )


def generate_recommendations(resume: Resume, gaps: Sequence[Gap]) -> list[Recommendation]:
    """Skills, then keywords, then experience; at most one of each."""
    candidates = (
        _missing_skills(gaps),
        _missing_keywords(gaps),
        _experience_detail(resume),
    )
    return [r for r in candidates if r is not None]
