"""Prompt templates for LLM extraction calls."""

JOB_FIELDS_EXAMPLE = """{
  "title": "<specific job title, e.g. Senior Full Stack Developer>",
  "company": "<company name or null>",
  "required_skills": ["<must-have skill>", ...],
  "preferred_skills": ["<nice-to-have skill>", ...],
  "keywords": [{"word": "<keyword>", "frequency": <times it appears>}, ...],
  "years_of_experience": <number or null>,
  "description": "<cleaned job description>"
}"""

RESUME_FIELDS_EXAMPLE = """{
  "skills": ["<skill>", ...],
  "experience": [
    {
      "title": "<job title>",
      "company": "<company name>",
      "start_date": "<MM/YYYY or YYYY, or null>",
      "end_date": "<MM/YYYY or YYYY, or null if current>",
      "description": "<responsibilities and achievements, or null>"
    }
  ],
  "education": [
    {
      "degree": "<e.g. Bachelor of Science>",
      "institution": "<university or school>",
      "field": "<field of study or null>",
      "graduation_date": "<MM/YYYY or YYYY, or null>"
    }
  ]
}"""

_JSON_RULES = """Respond with ONLY valid JSON (no markdown, no code fences) using EXACTLY these field names.
- Strings: use "" if there is no value, never null, unless the field says "or null".
- Arrays: use [] if there are no items, never null or {}."""


def build_job_prompt(job_text: str) -> str:
    """Extraction prompt for a raw job description."""
    return f"""Analyze the following job description and extract structured information.

JOB DESCRIPTION:
---
{job_text}
---

Extract:
- Job title (be specific, e.g. "Senior Full Stack Developer" not just "Developer")
- Company name if mentioned
- Required skills (must-have technical skills, frameworks, tools)
- Preferred skills (nice-to-have, bonus skills)
- Important keywords, each with the number of times it appears in the text
- Years of experience required, if mentioned
- A clean description (remove noise, keep essential information)

Be precise and extract only information that is clearly stated.

{_JSON_RULES}
{JOB_FIELDS_EXAMPLE}"""


def build_resume_prompt(resume_text: str) -> str:
    """Extraction prompt for raw resume text."""
    return f"""Analyze the following resume and extract structured information.

RESUME:
---
{resume_text}
---

Extract:
- Skills: all technical skills, programming languages, frameworks and tools mentioned
- Experience: one entry per position, with separate "start_date" and "end_date" fields (not a single "dates" field)
- Education: one entry per degree

Be thorough and extract all relevant information.

{_JSON_RULES}
{RESUME_FIELDS_EXAMPLE}"""
