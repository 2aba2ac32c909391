from typing import Literal

from pydantic import EmailStr, Field

from jobboard.models.user import User
from jobboard.schemas.base import CamelModel
from jobboard.schemas.profile import ProfileResponse, profile_to_response

Role = Literal["job_seeker", "employer", "admin"]


class UserCreate(CamelModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    email: EmailStr
    role: Role = "job_seeker"


class LoginRequest(CamelModel):
    username: str
    password: str


class UserSummary(CamelModel):
    id: int
    username: str
    email: str
    role: Role
    profile: ProfileResponse | None = None


class UserResponse(UserSummary):
    profile_completed: bool
    status: Literal["active", "suspended"]
    created_at: str


class UserStatusUpdate(CamelModel):
    status: Literal["active", "suspended"]


def user_to_summary(user: User) -> UserSummary:
    return UserSummary(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        profile=profile_to_response(user.profile),
    )


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        role=user.role,
        profile=profile_to_response(user.profile),
        profile_completed=user.profile_completed,
        status=user.status,
        created_at=user.created_at,
    )
