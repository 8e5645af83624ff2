"""Tests for the Gap Identifier."""

import pytest

from models.schemas.job import Job, Keyword
from models.schemas.resume import Resume
from services.scoring.gaps import identify_gaps, keyword_importance


@pytest.mark.parametrize(
    "frequency,expected",
    [(0, "low"), (1, "low"), (2, "medium"), (4, "medium"), (5, "high"), (12, "high")],
)
def test_keyword_importance(frequency, expected):
    assert keyword_importance(frequency) == expected


def test_python_example():
    resume = Resume(skills=["React", "Node"])
    job = Job(required_skills=["React.js", "Python"])
    gaps = identify_gaps(resume, job)
    assert len(gaps) == 1
    assert gaps[0].type == "skill"
    assert gaps[0].missing == "Python"
    assert gaps[0].importance == "high"
    assert gaps[0].frequency is None


def test_emission_order_follows_job_lists():
    resume = Resume(skills=["python"], text="python developer")
    job = Job(
        required_skills=["Go", "Python", "Rust"],
        preferred_skills=["Terraform", "python3", "Helm"],
        keywords=[
            Keyword(word="kubernetes", frequency=1),
            Keyword(word="developer", frequency=9),
            Keyword(word="observability", frequency=5),
        ],
    )
    gaps = identify_gaps(resume, job)
    assert [(g.type, g.missing, g.importance) for g in gaps] == [
        ("skill", "Go", "high"),
        ("skill", "Rust", "high"),
        ("skill", "Terraform", "medium"),
        ("skill", "Helm", "medium"),
        ("keyword", "kubernetes", "low"),
        ("keyword", "observability", "high"),
    ]
    assert gaps[-1].frequency == 5


def test_high_importance_skill_gaps_are_unmatched_required():
    resume = Resume(skills=["docker", "aws"])
    job = Job(required_skills=["Docker", "GCP", "Azure"], preferred_skills=["Ansible"])
    high = [g.missing for g in identify_gaps(resume, job) if g.type == "skill" and g.importance == "high"]
    assert high == ["GCP", "Azure"]


def test_no_reserved_gap_types_emitted():
    resume = Resume()
    job = Job(
        required_skills=["python"],
        preferred_skills=["go"],
        keywords=[Keyword(word="backend", frequency=3)],
        description="Bachelor degree and 5 years experience",
    )
    assert {g.type for g in identify_gaps(resume, job)} == {"skill", "keyword"}


def test_no_gaps_when_everything_matches():
    resume = Resume(skills=["python", "docker"], text="Python and Docker")
    job = Job(
        required_skills=["Python"],
        preferred_skills=["docker"],
        keywords=[Keyword(word="python", frequency=4)],
    )
    assert identify_gaps(resume, job) == []
