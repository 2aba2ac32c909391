"""
Request guards, composed as FastAPI dependencies.

Routes chain them in the order authentication -> role -> ownership ->
business state; the first one that fails answers the request.
"""
from fastapi import Cookie, Depends, HTTPException
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.services import storage
from jobboard.services.job_service import is_accepting_applications
from jobboard.services.session_service import session_service


async def get_current_user(
    session_token: str | None = Cookie(None, alias=settings.session_cookie_name),
    db: Session = Depends(get_db),
) -> User | None:
    if not session_token:
        return None
    return session_service.resolve(db, session_token)


async def require_user(user: User | None = Depends(get_current_user)) -> User:
    if user is None:
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


def require_role(*roles: str, detail: str | None = None):
    async def guard(user: User = Depends(require_user)) -> User:
        if user.role not in roles:
            raise HTTPException(
                status_code=403,
                detail=detail or f"Only {' or '.join(roles)} users may do this",
            )
        return user

    return guard


require_admin = require_role("admin", detail="Admin access required")


def is_owner_or_admin(user: User, owner_id: int) -> bool:
    return user.role == "admin" or user.id == owner_id


async def get_job_or_404(job_id: int, db: Session = Depends(get_db)) -> Job:
    job = storage.jobs.get(db, job_id)
    if job is None:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


async def require_job_owner(
    user: User = Depends(require_user),
    job: Job = Depends(get_job_or_404),
) -> Job:
    if not is_owner_or_admin(user, job.employer_id):
        raise HTTPException(status_code=403, detail="You don't have permission to manage this job")
    return job


async def get_application_or_404(application_id: int, db: Session = Depends(get_db)) -> Application:
    application = storage.applications.get(db, application_id)
    if application is None:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


async def require_application_reviewer(
    user: User = Depends(require_user),
    application: Application = Depends(get_application_or_404),
) -> Application:
    if not is_owner_or_admin(user, application.job.employer_id):
        raise HTTPException(status_code=403, detail="You don't have permission to update this application")
    return application


async def require_open_job(
    user: User = Depends(require_user),
    job: Job = Depends(get_job_or_404),
) -> Job:
    # Closed postings refuse every caller, before any role check.
    if not is_accepting_applications(job):
        raise HTTPException(status_code=400, detail="This job is no longer accepting applications")
    return job


async def require_not_applied(
    job: Job = Depends(require_open_job),
    seeker: User = Depends(require_role("job_seeker", detail="Only job seekers can apply for jobs")),
    db: Session = Depends(get_db),
) -> Job:
    existing = (
        db.query(Application)
        .filter(Application.job_id == job.id, Application.job_seeker_id == seeker.id)
        .first()
    )
    if existing is not None:
        raise HTTPException(status_code=400, detail="You have already applied for this job")
    return job
