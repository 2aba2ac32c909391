import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import (
    get_application_or_404,
    is_owner_or_admin,
    require_application_reviewer,
    require_role,
    require_user,
)
from jobboard.models.application import Application
from jobboard.models.user import User
from jobboard.schemas.application import (
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationWithJobResponse,
)
from jobboard.schemas.job import JobResponse
from jobboard.services import storage

logger = logging.getLogger("jobboard.applications")

router = APIRouter(prefix="/applications", tags=["applications"])


def _application_with_job(application: Application) -> ApplicationWithJobResponse:
    return ApplicationWithJobResponse(
        **ApplicationResponse.model_validate(application).model_dump(),
        job=JobResponse.model_validate(application.job),
    )


@router.get("", response_model=list[ApplicationWithJobResponse])
async def list_own_applications(
    seeker: User = Depends(require_role("job_seeker", detail="Only job seekers have applications")),
    db: Session = Depends(get_db),
):
    applications = (
        db.query(Application)
        .filter(Application.job_seeker_id == seeker.id)
        .order_by(Application.applied_at.desc(), Application.id.desc())
        .all()
    )
    return [_application_with_job(a) for a in applications]


@router.get("/{application_id}", response_model=ApplicationWithJobResponse)
async def get_application(
    user: User = Depends(require_user),
    application: Application = Depends(get_application_or_404),
):
    if user.id != application.job_seeker_id and not is_owner_or_admin(user, application.job.employer_id):
        raise HTTPException(status_code=403, detail="You don't have permission to view this application")
    return _application_with_job(application)


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application_status(
    req: ApplicationStatusUpdate,
    application: Application = Depends(require_application_reviewer),
    db: Session = Depends(get_db),
):
    updated = storage.applications.update(db, application.id, status=req.status)
    logger.info("Application id=%s moved to %s", updated.id, updated.status)
    return updated
