from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_role, require_user
from jobboard.models.user import User
from jobboard.schemas.profile import (
    EmployerProfileResponse,
    EmployerProfileUpdate,
    JobSeekerProfileResponse,
    JobSeekerProfileUpdate,
    ProfileResponse,
    profile_to_response,
)
from jobboard.services import storage

router = APIRouter(prefix="/profile", tags=["profiles"])

require_job_seeker = require_role("job_seeker", detail="Only job seekers have a job seeker profile")
require_employer = require_role("employer", detail="Only employers have an employer profile")


def _upsert(db: Session, store: storage.EntityStore, user: User, values: dict):
    existing = store.get_by(db, "user_id", user.id)
    if existing is None:
        profile = store.insert(db, user_id=user.id, **values)
    else:
        profile = store.update(db, existing.id, **values)
    if not user.profile_completed:
        storage.users.update(db, user.id, profile_completed=True)
    return profile


@router.get("", response_model=ProfileResponse)
async def get_own_profile(user: User = Depends(require_user)):
    profile = profile_to_response(user.profile)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/job-seeker", response_model=JobSeekerProfileResponse)
async def get_job_seeker_profile(user: User = Depends(require_job_seeker), db: Session = Depends(get_db)):
    profile = storage.job_seeker_profiles.get_by(db, "user_id", user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return JobSeekerProfileResponse.model_validate(profile)


@router.put("/job-seeker", response_model=JobSeekerProfileResponse)
async def update_job_seeker_profile(
    req: JobSeekerProfileUpdate,
    user: User = Depends(require_job_seeker),
    db: Session = Depends(get_db),
):
    profile = _upsert(db, storage.job_seeker_profiles, user, req.model_dump(exclude_unset=True))
    return JobSeekerProfileResponse.model_validate(profile)


@router.get("/employer", response_model=EmployerProfileResponse)
async def get_employer_profile(user: User = Depends(require_employer), db: Session = Depends(get_db)):
    profile = storage.employer_profiles.get_by(db, "user_id", user.id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return EmployerProfileResponse.model_validate(profile)


@router.put("/employer", response_model=EmployerProfileResponse)
async def update_employer_profile(
    req: EmployerProfileUpdate,
    user: User = Depends(require_employer),
    db: Session = Depends(get_db),
):
    profile = _upsert(db, storage.employer_profiles, user, req.model_dump(exclude_unset=True))
    return EmployerProfileResponse.model_validate(profile)
