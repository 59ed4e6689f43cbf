from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobly.auth import TokenClaims, ensure_admin
from jobly.database import get_db
from jobly.errors import BadRequestError, validation_messages
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.job import (
    JobCreate,
    JobDeletedResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobSearchFilter,
    JobUpdate,
)


router = APIRouter()


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def _coerce_search_params(raw: dict[str, Any]) -> dict[str, Any]:
    params = dict(raw)
    if "minSalary" in params:
        try:
            params["minSalary"] = int(params["minSalary"])
        except ValueError:
            # left as a string so validation reports it
            pass
    params["hasEquity"] = params.get("hasEquity") == "true"
    return params


def parse_job_search(request: Request) -> JobSearchFilter:
    params = _coerce_search_params(dict(request.query_params))
    try:
        return JobSearchFilter.model_validate(params)
    except ValidationError as exc:
        raise BadRequestError(validation_messages(exc.errors())) from exc


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def create_job(
    payload: JobCreate,
    jobs: JobRepository = Depends(get_job_repository),
    _: TokenClaims = Depends(ensure_admin),
) -> dict:
    job = jobs.create(payload.model_dump(by_alias=True, exclude_unset=True))
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    search: JobSearchFilter = Depends(parse_job_search),
    jobs: JobRepository = Depends(get_job_repository),
) -> dict:
    return {"jobs": jobs.find_all(search.model_dump(exclude_none=True))}


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(job_id: int, jobs: JobRepository = Depends(get_job_repository)) -> dict:
    return {"job": jobs.get(job_id)}


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: int,
    payload: JobUpdate,
    jobs: JobRepository = Depends(get_job_repository),
    _: TokenClaims = Depends(ensure_admin),
) -> dict:
    job = jobs.update(job_id, payload.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    jobs: JobRepository = Depends(get_job_repository),
    _: TokenClaims = Depends(ensure_admin),
) -> dict:
    jobs.remove(job_id)
    return {"deleted": job_id}
