from jobly.schemas.auth import RegisterRequest, TokenRequest, TokenResponse
from jobly.schemas.company import CompanyOut
from jobly.schemas.job import (
    JobCreate,
    JobDeletedResponse,
    JobDetailOut,
    JobDetailResponse,
    JobListItem,
    JobListResponse,
    JobOut,
    JobResponse,
    JobSearchFilter,
    JobUpdate,
)

__all__ = [
    "RegisterRequest",
    "TokenRequest",
    "TokenResponse",
    "CompanyOut",
    "JobCreate",
    "JobUpdate",
    "JobSearchFilter",
    "JobOut",
    "JobListItem",
    "JobDetailOut",
    "JobResponse",
    "JobDetailResponse",
    "JobListResponse",
    "JobDeletedResponse",
]
