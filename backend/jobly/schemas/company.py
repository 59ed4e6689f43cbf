from __future__ import annotations

from pydantic import BaseModel, Field


class CompanyOut(BaseModel):
    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = Field(default=None, alias="numEmployees")
    logo_url: str | None = Field(default=None, alias="logoUrl")
