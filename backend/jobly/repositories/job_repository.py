"""Data access for jobs.

Every method runs one statement against the injected session and commits it.
Records come back as plain dicts keyed the way the API exposes them
(``companyHandle``, ``companyName``, ...).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Numeric, cast, delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.errors import BadRequestError, NotFoundError
from jobly.helpers.sql import sql_for_partial_update
from jobly.models.company import Company
from jobly.models.job import Job


logger = logging.getLogger(__name__)

# Request field -> jobs column, for the fields a patch may touch.
UPDATABLE_COLUMNS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}


def _job_record(job: Job) -> dict[str, Any]:
    return {
        "id": job.id,
        "title": job.title,
        "salary": job.salary,
        "equity": job.equity,
        "companyHandle": job.company_handle,
    }


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    # 23503 is the SQLSTATE for foreign_key_violation; SQLite only reports text.
    orig = exc.orig
    if getattr(orig, "pgcode", None) == "23503" or getattr(orig, "sqlstate", None) == "23503":
        return True
    return "foreign key" in str(orig).lower()


def _company_record(company: Company) -> dict[str, Any]:
    return {
        "handle": company.handle,
        "name": company.name,
        "description": company.description,
        "numEmployees": company.num_employees,
        "logoUrl": company.logo_url,
    }


class JobRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Insert a job and return it with its generated id.

        ``data`` holds ``title`` and ``companyHandle`` plus optional ``salary``
        and ``equity``. An unknown company handle raises BadRequestError;
        other integrity errors propagate unchanged.
        """
        job = Job(
            title=data["title"],
            salary=data.get("salary"),
            equity=data.get("equity"),
            company_handle=data["companyHandle"],
        )
        self.db.add(job)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not _is_foreign_key_violation(exc):
                raise
            raise BadRequestError(f"No company: {data['companyHandle']}") from exc
        self.db.refresh(job)
        logger.info("Created job %s for company %s", job.id, job.company_handle)
        return _job_record(job)

    def find_all(self, filters: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        """List jobs, optionally filtered, ordered by title.

        Supported filters (all optional, combined with AND):
        - ``min_salary``: salary at least this much
        - ``has_equity``: when true, only jobs with non-zero equity
        - ``title``: case-insensitive partial match on title
        """
        filters = filters or {}
        where_expressions = []

        min_salary = filters.get("min_salary")
        if min_salary is not None:
            where_expressions.append(Job.salary >= min_salary)

        if filters.get("has_equity") is True:
            where_expressions.append(cast(Job.equity, Numeric) > 0)

        title = filters.get("title")
        if title is not None:
            where_expressions.append(Job.title.ilike(f"%{title}%"))

        query = (
            select(Job, Company.name)
            .join(Company, Company.handle == Job.company_handle)
            .where(*where_expressions)
            .order_by(Job.title, Job.id)
        )
        rows = self.db.execute(query).all()
        return [{**_job_record(job), "companyName": company_name} for job, company_name in rows]

    def get(self, job_id: int) -> dict[str, Any]:
        """Return a job with its company details nested under ``company``."""
        row = self.db.execute(
            select(Job, Company)
            .join(Company, Company.handle == Job.company_handle)
            .where(Job.id == job_id)
        ).first()
        if row is None:
            raise NotFoundError(f"No job: {job_id}")

        job, company = row
        return {
            "id": job.id,
            "title": job.title,
            "salary": job.salary,
            "equity": job.equity,
            "company": _company_record(company),
        }

    def update(self, job_id: int, data: Mapping[str, Any]) -> dict[str, Any]:
        """Apply a partial update and return the updated job.

        Only title, salary and equity can change; anything else (including
        ``companyHandle`` and ``id``) raises BadRequestError, as does an empty
        patch. A missing job raises NotFoundError.
        """
        locked = sorted(key for key in data if key not in UPDATABLE_COLUMNS)
        if locked:
            raise BadRequestError(f"Cannot update field(s): {', '.join(locked)}")

        partial = sql_for_partial_update(data, UPDATABLE_COLUMNS)
        logger.debug("Updating job %s SET %s", job_id, partial.set_cols)

        table = Job.__table__
        result = self.db.execute(update(table).where(table.c.id == job_id).values(partial.params()))
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"No job: {job_id}")
        self.db.commit()

        job = self.db.get(Job, job_id, populate_existing=True)
        logger.info("Updated job %s (%s)", job_id, ", ".join(partial.columns))
        return _job_record(job)

    def remove(self, job_id: int) -> None:
        """Delete a job; NotFoundError if it did not exist."""
        table = Job.__table__
        result = self.db.execute(delete(table).where(table.c.id == job_id))
        if result.rowcount == 0:
            self.db.rollback()
            raise NotFoundError(f"No job: {job_id}")
        self.db.commit()
        logger.info("Removed job %s", job_id)
