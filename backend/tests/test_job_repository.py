from __future__ import annotations

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from jobly.errors import BadRequestError, NotFoundError
from jobly.models.job import Job
from jobly.repositories.job_repository import JobRepository


def _listed(job_id: int, title: str, salary, equity) -> dict:
    return {
        "id": job_id,
        "title": title,
        "salary": salary,
        "equity": equity,
        "companyHandle": "c1",
        "companyName": "C1",
    }


@pytest.fixture()
def jobs(db) -> JobRepository:
    return JobRepository(db)


def test_create_returns_record_with_generated_id(jobs):
    new_job = {"companyHandle": "c1", "title": "Test", "salary": 100, "equity": "0.1"}
    job = jobs.create(new_job)
    assert isinstance(job["id"], int)
    assert job == {**new_job, "id": job["id"]}


def test_create_then_get_round_trips_fields(jobs):
    created = jobs.create({"companyHandle": "c2", "title": "Roundtrip", "salary": 5, "equity": "0.25"})
    fetched = jobs.get(created["id"])
    assert fetched["title"] == "Roundtrip"
    assert fetched["salary"] == 5
    assert fetched["equity"] == "0.25"
    assert fetched["company"]["handle"] == "c2"


def test_create_without_optional_fields(jobs):
    job = jobs.create({"companyHandle": "c1", "title": "Bare"})
    assert job["salary"] is None
    assert job["equity"] is None


def test_create_with_unknown_company_is_bad_request(jobs):
    with pytest.raises(BadRequestError):
        jobs.create({"companyHandle": "nope", "title": "Orphan"})


def test_create_keeps_every_equity_digit(jobs):
    created = jobs.create({"companyHandle": "c1", "title": "Precise", "equity": "0.1234"})
    assert created["equity"] == "0.1234"
    assert jobs.get(created["id"])["equity"] == "0.1234"


def test_create_with_negative_salary_is_not_reported_as_missing_company(jobs):
    with pytest.raises(IntegrityError):
        jobs.create({"companyHandle": "c1", "title": "Neg", "salary": -5})
    assert [job["title"] for job in jobs.find_all({"title": "Neg"})] == []


def test_find_all_without_filter(jobs, job_ids):
    assert jobs.find_all() == [
        _listed(job_ids[0], "Job1", 100, "0.1"),
        _listed(job_ids[1], "Job2", 200, "0.2"),
        _listed(job_ids[2], "Job3", 300, "0"),
        _listed(job_ids[3], "Job4", None, None),
    ]


def test_find_all_by_min_salary(jobs, job_ids):
    assert jobs.find_all({"min_salary": 250}) == [_listed(job_ids[2], "Job3", 300, "0")]


def test_find_all_by_equity(jobs, job_ids):
    assert jobs.find_all({"has_equity": True}) == [
        _listed(job_ids[0], "Job1", 100, "0.1"),
        _listed(job_ids[1], "Job2", 200, "0.2"),
    ]


def test_find_all_has_equity_false_imposes_no_constraint(jobs):
    assert len(jobs.find_all({"has_equity": False})) == 4


def test_find_all_by_min_salary_and_equity(jobs, job_ids):
    assert jobs.find_all({"min_salary": 150, "has_equity": True}) == [
        _listed(job_ids[1], "Job2", 200, "0.2"),
    ]


def test_find_all_by_title_is_case_insensitive_partial(jobs, job_ids):
    assert jobs.find_all({"title": "OB1"}) == [_listed(job_ids[0], "Job1", 100, "0.1")]


def test_find_all_has_equity_includes_tiny_equity(jobs):
    created = jobs.create({"companyHandle": "c2", "title": "Tiny", "equity": "0.0005"})
    assert created["id"] in [job["id"] for job in jobs.find_all({"has_equity": True})]


def test_find_all_no_match_is_empty(jobs):
    assert jobs.find_all({"title": "nothing-like-this"}) == []


def test_get_nests_company(jobs, job_ids):
    assert jobs.get(job_ids[0]) == {
        "id": job_ids[0],
        "title": "Job1",
        "salary": 100,
        "equity": "0.1",
        "company": {
            "handle": "c1",
            "name": "C1",
            "description": "Desc1",
            "numEmployees": 1,
            "logoUrl": "http://c1.img",
        },
    }


def test_get_missing_job(jobs):
    with pytest.raises(NotFoundError):
        jobs.get(0)


def test_update(jobs, job_ids):
    update_data = {"title": "New", "salary": 500, "equity": "0.5"}
    job = jobs.update(job_ids[0], update_data)
    assert job == {"id": job_ids[0], "companyHandle": "c1", **update_data}


def test_update_leaves_other_fields_alone(jobs, job_ids):
    job = jobs.update(job_ids[1], {"salary": 201})
    assert job == {"id": job_ids[1], "title": "Job2", "salary": 201, "equity": "0.2", "companyHandle": "c1"}


def test_update_can_clear_salary(jobs, job_ids):
    job = jobs.update(job_ids[0], {"salary": None})
    assert job["salary"] is None


def test_update_keeps_every_equity_digit(jobs, job_ids):
    assert jobs.update(job_ids[0], {"equity": "0.98765"})["equity"] == "0.98765"


def test_update_missing_job(jobs):
    with pytest.raises(NotFoundError):
        jobs.update(0, {"title": "test"})


def test_update_with_no_data(jobs, job_ids):
    with pytest.raises(BadRequestError):
        jobs.update(job_ids[0], {})


def test_update_refuses_company_handle(jobs, job_ids):
    with pytest.raises(BadRequestError):
        jobs.update(job_ids[0], {"companyHandle": "c2"})
    assert jobs.get(job_ids[0])["company"]["handle"] == "c1"


def test_remove(jobs, db, job_ids):
    jobs.remove(job_ids[0])
    remaining = db.execute(select(Job.id).where(Job.id == job_ids[0])).all()
    assert remaining == []


def test_remove_missing_job(jobs):
    with pytest.raises(NotFoundError):
        jobs.remove(0)
