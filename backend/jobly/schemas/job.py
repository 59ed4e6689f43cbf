from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from jobly.schemas.company import CompanyOut


EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"


class JobCreate(BaseModel):
    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0, strict=True)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)

    class Config:
        extra = "forbid"


class JobUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0, strict=True)
    equity: str | None = Field(default=None, pattern=EQUITY_PATTERN)

    class Config:
        extra = "forbid"

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("title may not be null")
        return value


class JobSearchFilter(BaseModel):
    min_salary: int | None = Field(default=None, alias="minSalary", ge=0, strict=True)
    has_equity: bool | None = Field(default=None, alias="hasEquity")
    title: str | None = Field(default=None, min_length=1)

    class Config:
        extra = "forbid"


class JobOut(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company_handle: str = Field(alias="companyHandle")


class JobListItem(JobOut):
    company_name: str = Field(alias="companyName")


class JobDetailOut(BaseModel):
    id: int
    title: str
    salary: int | None = None
    equity: str | None = None
    company: CompanyOut


class JobResponse(BaseModel):
    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetailOut


class JobListResponse(BaseModel):
    jobs: list[JobListItem]


class JobDeletedResponse(BaseModel):
    deleted: int
