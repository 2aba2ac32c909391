from typing import Annotated, Any, Literal, Union

from pydantic import Field

from jobboard.models.profile import EmployerProfile, JobSeekerProfile
from jobboard.schemas.base import CamelModel


class JobSeekerProfileUpdate(CamelModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    phone: str | None = None
    location: str | None = None
    bio: str | None = None
    resume_url: str | None = None
    skills: list[str] | None = None
    education: list[dict[str, Any]] | None = None
    experience: list[dict[str, Any]] | None = None


class EmployerProfileUpdate(CamelModel):
    company_name: str = Field(min_length=2)
    industry: str = Field(min_length=2)
    company_size: str | None = None
    location: str | None = None
    website: str | None = None
    description: str | None = None
    logo_url: str | None = None


class JobSeekerProfileResponse(CamelModel):
    role: Literal["job_seeker"] = "job_seeker"
    id: int
    user_id: int
    first_name: str
    last_name: str
    phone: str | None
    location: str | None
    bio: str | None
    resume_url: str | None
    skills: list[str] | None
    education: list[dict[str, Any]] | None
    experience: list[dict[str, Any]] | None
    created_at: str
    updated_at: str


class EmployerProfileResponse(CamelModel):
    role: Literal["employer"] = "employer"
    id: int
    user_id: int
    company_name: str
    industry: str
    company_size: str | None
    location: str | None
    website: str | None
    description: str | None
    logo_url: str | None
    created_at: str
    updated_at: str


ProfileResponse = Annotated[
    Union[JobSeekerProfileResponse, EmployerProfileResponse],
    Field(discriminator="role"),
]


def profile_to_response(profile: JobSeekerProfile | EmployerProfile | None):
    if profile is None:
        return None
    if isinstance(profile, JobSeekerProfile):
        return JobSeekerProfileResponse.model_validate(profile)
    return EmployerProfileResponse.model_validate(profile)
