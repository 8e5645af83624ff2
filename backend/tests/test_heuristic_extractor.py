from services.heuristic_extractor import (
    DEFAULT_JOB_TITLE,
    JOB_SKILL_VOCABULARY,
    extract_company,
    extract_education,
    extract_experience,
    extract_job,
    extract_keywords,
    extract_resume,
    extract_title,
    find_vocabulary_skills,
    split_preferred_section,
)

SAMPLE_JOB = """Job Title: Senior Backend Developer
Acme Analytics is hiring.

Requirements:
Python, PostgreSQL and Docker in production.

Nice to have:
Kubernetes, AWS, Python tooling
"""

SAMPLE_RESUME = """Jane Doe
Senior Software Engineer
Acme Corp
Python, Docker, React, AWS
Bachelor of Science in Computer Science
State University
"""


# --- Title and company ---


def test_title_from_label():
    assert extract_title(SAMPLE_JOB) == "Senior Backend Developer"


def test_title_from_looking_for():
    assert extract_title("Looking for a Senior Data Engineer to join us") == "Data Engineer"


def test_title_default():
    assert extract_title("we need someone who can code") == DEFAULT_JOB_TITLE


def test_company_none_when_absent():
    assert extract_company("remote role, python required") is None


# --- Keywords ---


def test_keywords_counted_and_ordered():
    keywords = extract_keywords("Python python PYTHON. Docker, docker; kubernetes api")
    assert [(k.word, k.frequency) for k in keywords] == [
        ("python", 3),
        ("docker", 2),
        ("kubernetes", 1),
    ]


def test_keywords_capped_at_twenty():
    text = " ".join(f"keyword{i:02d}" for i in range(30))
    assert len(extract_keywords(text)) == 20


# --- Skills ---


def test_vocabulary_skills_capitalized():
    assert find_vocabulary_skills("Experience with Python and Docker", JOB_SKILL_VOCABULARY) == [
        "Python",
        "Docker",
    ]


def test_split_preferred_section():
    required, preferred = split_preferred_section(SAMPLE_JOB)
    assert "PostgreSQL" in required
    assert preferred.startswith("Nice to have")


def test_split_without_heading():
    assert split_preferred_section("Python and Docker") == ("Python and Docker", "")


def test_extract_job():
    job = extract_job(SAMPLE_JOB)
    assert job.title == "Senior Backend Developer"
    assert job.required_skills == ["Python", "Postgresql", "Docker"]
    # Python is already required
    assert job.preferred_skills == ["Kubernetes", "Aws"]
    assert job.description == SAMPLE_JOB
    assert job.keywords


# --- Resume ---


def test_extract_experience():
    entries = extract_experience(SAMPLE_RESUME)
    assert len(entries) == 1
    assert entries[0].title == "Senior Software Engineer"
    assert entries[0].company == "Acme Corp"
    assert entries[0].description is None


def test_extract_education():
    entries = extract_education(SAMPLE_RESUME)
    assert len(entries) == 1
    assert entries[0].degree == "Bachelor of Science in Computer Science"
    assert entries[0].institution == "State University"


def test_role_on_last_line_is_skipped():
    assert extract_experience("Skills\nSoftware Engineer") == []


def test_extract_resume():
    resume = extract_resume(SAMPLE_RESUME)
    assert resume.skills == ["Python", "React", "Docker", "Aws"]
    assert len(resume.experience) == 1
    assert len(resume.education) == 1


def test_preferred_heading_after_blank_line():
    required, preferred = split_preferred_section("Python\n\n  Bonus points: Kubernetes\n")
    assert required == "Python\n\n"
    assert preferred == "  Bonus points: Kubernetes\n"
