from typing import Literal

from pydantic import AnyUrl

from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobResponse
from jobboard.schemas.user import UserSummary

ApplicationStatus = Literal["applied", "reviewed", "interviewing", "offered", "rejected"]


class ApplicationCreate(CamelModel):
    resume_url: AnyUrl | None = None
    cover_letter: str | None = None


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class ApplicationResponse(CamelModel):
    id: int
    job_id: int
    job_seeker_id: int
    resume_url: str | None
    cover_letter: str | None
    status: ApplicationStatus
    compatibility_score: float | None
    applied_at: str
    updated_at: str


class ApplicationWithSeekerResponse(ApplicationResponse):
    job_seeker: UserSummary


class ApplicationWithJobResponse(ApplicationResponse):
    job: JobResponse
