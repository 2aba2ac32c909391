from datetime import datetime
from typing import Literal

from pydantic import Field

from jobboard.schemas.base import CamelModel
from jobboard.schemas.user import UserSummary

JobType = Literal["full-time", "part-time", "contract", "internship"]


class JobCreate(CamelModel):
    title: str = Field(min_length=5)
    description: str = Field(min_length=20)
    qualifications: str = Field(min_length=10)
    responsibilities: str = Field(min_length=10)
    location: str = Field(min_length=2)
    job_type: JobType
    salary_min: float | None = None
    salary_max: float | None = None
    skills: list[str] | None = None
    is_active: bool = True
    expires_at: datetime | None = None


class JobUpdate(CamelModel):
    # Omitted fields stay unset; an explicit null is only accepted for nullable columns.
    title: str = Field(None, min_length=5)
    description: str = Field(None, min_length=20)
    qualifications: str = Field(None, min_length=10)
    responsibilities: str = Field(None, min_length=10)
    location: str = Field(None, min_length=2)
    job_type: JobType = None
    salary_min: float | None = None
    salary_max: float | None = None
    skills: list[str] | None = None
    is_active: bool = None
    expires_at: datetime | None = None


class JobResponse(CamelModel):
    id: int
    employer_id: int
    title: str
    description: str
    qualifications: str
    responsibilities: str
    location: str
    job_type: str
    salary_min: float | None
    salary_max: float | None
    skills: list[str] | None
    is_active: bool
    posted_at: str
    expires_at: str | None
    updated_at: str


class JobDetailResponse(JobResponse):
    employer: UserSummary | None = None
