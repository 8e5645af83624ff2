import json
from unittest.mock import patch

import pytest

from models.schemas.analysis import Analysis
from models.schemas.extraction import JobExtraction, ResumeExtraction
from models.schemas.job import Keyword
from services.store import RecordStore, get_store, reset_store

RESUME = ResumeExtraction(skills=["Python", "Docker"])
JOB = JobExtraction(
    title="Backend Engineer",
    required_skills=["Python"],
    keywords=[Keyword(word="python", frequency=3)],
    description="Python services",
)


def test_create_and_get_resume():
    store = RecordStore()
    record = store.create_resume("user-1", "resume text", RESUME, file_name="cv.pdf", file_size=1024)
    assert record.id
    assert record.user_id == "user-1"
    assert record.text == "resume text"
    assert record.skills == ["Python", "Docker"]
    assert record.created_at == record.updated_at
    assert store.get_resume(record.id) == record
    assert store.get_resume("missing") is None


def test_create_job_copies_extraction():
    store = RecordStore()
    record = store.create_job("user-1", JOB, url="https://jobs.example.com/1")
    assert record.title == "Backend Engineer"
    assert record.url == "https://jobs.example.com/1"
    assert record.to_job().keywords == JOB.keywords
    assert record.to_job().description == "Python services"


def test_ids_are_unique():
    store = RecordStore()
    ids = {store.create_job("user-1", JOB).id for _ in range(5)}
    assert len(ids) == 5
    assert store.count("jobs") == 5


def test_analysis_record():
    store = RecordStore()
    record = store.create_analysis("user-1", "r1", "j1", Analysis(overall_score=72))
    assert record.overall_score == 72
    assert (record.resume_id, record.job_id) == ("r1", "j1")
    assert store.get_analysis(record.id) == record


def test_persists_to_json_file(tmp_path):
    path = tmp_path / "data" / "store.json"
    store = RecordStore(path)
    resume = store.create_resume("user-1", "resume text", RESUME)
    job = store.create_job("user-1", JOB)

    data = json.loads(path.read_text())
    assert set(data) == {"resumes", "jobs", "analyses"}
    assert resume.id in data["resumes"]

    reloaded = RecordStore(path)
    assert reloaded.get_resume(resume.id) == resume
    assert reloaded.get_job(job.id) == job


def test_missing_file_starts_empty(tmp_path):
    store = RecordStore(tmp_path / "nothing.json")
    assert store.count("resumes") == 0


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json")
    assert RecordStore(path).count("jobs") == 0


def test_singleton():
    first = get_store()
    assert get_store() is first
    reset_store()
    assert get_store() is not first


def test_failed_write_is_not_kept(tmp_path):
    store = RecordStore(tmp_path / "store.json")
    with patch.object(RecordStore, "_save", side_effect=OSError("disk full")):
        with pytest.raises(OSError):
            store.create_job("user-1", JOB)
    assert store.count("jobs") == 0

    store.create_job("user-1", JOB)
    data = json.loads((tmp_path / "store.json").read_text())
    assert len(data["jobs"]) == 1


def test_non_object_file_starts_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("[1, 2, 3]")
    assert RecordStore(path).count("resumes") == 0


def test_stale_records_start_empty(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({"jobs": {"j1": {"id": "j1"}}, "resumes": {}, "analyses": {}}))
    store = RecordStore(path)
    assert store.count("jobs") == 0
    assert store.get_job("j1") is None
