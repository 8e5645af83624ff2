"""Rule-based extraction used when no LLM provider is available.

Produces the same JobExtraction / ResumeExtraction shapes as the LLM
strategy, from regex patterns and small fixed vocabularies. Quality is
deliberately modest; it exists so the scoring engine always has input.
"""

import re
from collections import Counter

from models.schemas.extraction import JobExtraction, ResumeExtraction
from models.schemas.job import Keyword
from models.schemas.resume import EducationEntry, ExperienceEntry

DEFAULT_JOB_TITLE = "Job Position"
MAX_KEYWORDS = 20
MIN_KEYWORD_CHARS = 4  # keywords must be longer than this

_TITLE_PATTERNS: list[re.Pattern] = [
    re.compile(r"(?:Job Title|Position|Title):\s*(.+)", re.IGNORECASE),
    re.compile(
        r"(?:We are|Looking for|Seeking)\s+(?:a\s+)?(?:Senior\s+|Junior\s+|Mid-level\s+)?"
        r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)"
    ),
    re.compile(r"^([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s+(?:Developer|Engineer|Designer|Manager)"),
]

_COMPANY_PATTERNS: list[re.Pattern] = [
    re.compile(r"(?:Company|About|at)\s+([A-Z][a-zA-Z\s&]+)"),
    re.compile(r"([A-Z][a-zA-Z\s&]{3,})\s+(?:is|seeks|looking)"),
]

# A heading line that opens the nice-to-have part of a posting
_PREFERRED_HEADING_RE = re.compile(
    r"^[ \t]*(?:preferred(?:\s+(?:skills|qualifications))?|nice[\s-]to[\s-]have|bonus(?:\s+points)?|pluses)\s*:?",
    re.IGNORECASE | re.MULTILINE,
)

JOB_SKILL_VOCABULARY: tuple[str, ...] = (
    "javascript", "typescript", "python", "react", "node",
    "postgresql", "docker", "kubernetes", "aws", "git",
)

RESUME_SKILL_VOCABULARY: tuple[str, ...] = (
    "javascript", "typescript", "python", "java", "react", "vue", "angular",
    "node", "express", "nestjs", "postgresql", "mysql", "mongodb", "docker",
    "kubernetes", "aws", "azure", "git", "html", "css", "sass", "tailwind",
    "bootstrap",
)

_TITLE_MARKERS = ("developer", "engineer", "manager", "analyst", "designer")
_DEGREE_MARKERS = ("bachelor", "master", "phd", "graduation")


def _first_group(patterns: list[re.Pattern], text: str) -> str | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return None


def extract_title(text: str) -> str:
    return _first_group(_TITLE_PATTERNS, text) or DEFAULT_JOB_TITLE


def extract_company(text: str) -> str | None:
    return _first_group(_COMPANY_PATTERNS, text)


def extract_keywords(text: str) -> list[Keyword]:
    """Most frequent words longer than four characters, ties in first-seen order."""
    words = re.sub(r"[^\w\s]", " ", text.lower()).split()
    counts = Counter(w for w in words if len(w) > MIN_KEYWORD_CHARS)
    return [Keyword(word=w, frequency=n) for w, n in counts.most_common(MAX_KEYWORDS)]


def find_vocabulary_skills(text: str, vocabulary: tuple[str, ...]) -> list[str]:
    """Vocabulary terms contained in text, first letter capitalized."""
    lower = text.lower()
    return [skill.capitalize() for skill in vocabulary if skill in lower]


def split_preferred_section(text: str) -> tuple[str, str]:
    """Split a posting at its first nice-to-have heading: (required, preferred)."""
    match = _PREFERRED_HEADING_RE.search(text)
    if not match:
        return text, ""
    return text[:match.start()], text[match.start():]


def extract_job(text: str) -> JobExtraction:
    required_text, preferred_text = split_preferred_section(text)
    required = find_vocabulary_skills(required_text, JOB_SKILL_VOCABULARY)
    preferred = [
        s for s in find_vocabulary_skills(preferred_text, JOB_SKILL_VOCABULARY)
        if s not in required
    ]
    return JobExtraction(
        title=extract_title(text),
        company=extract_company(text),
        required_skills=required,
        preferred_skills=preferred,
        keywords=extract_keywords(text),
        description=text,
    )


def _next_line(lines: list[str], i: int) -> str:
    return lines[i + 1].strip() if i + 1 < len(lines) else ""


def extract_experience(text: str) -> list[ExperienceEntry]:
    """A line naming a role becomes the title, the line after it the company."""
    lines = text.split("\n")
    entries = []
    for i, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        if any(marker in line.lower() for marker in _TITLE_MARKERS):
            company = _next_line(lines, i)
            if company:
                entries.append(ExperienceEntry(title=line, company=company))
    return entries


def extract_education(text: str) -> list[EducationEntry]:
    """A line naming a degree becomes the degree, the line after it the institution."""
    lines = text.split("\n")
    entries = []
    for i, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        if any(marker in line.lower() for marker in _DEGREE_MARKERS):
            institution = _next_line(lines, i)
            if institution:
                entries.append(EducationEntry(degree=line, institution=institution))
    return entries


def extract_resume(text: str) -> ResumeExtraction:
    return ResumeExtraction(
        skills=list(dict.fromkeys(find_vocabulary_skills(text, RESUME_SKILL_VOCABULARY))),
        experience=extract_experience(text),
        education=extract_education(text),
    )
