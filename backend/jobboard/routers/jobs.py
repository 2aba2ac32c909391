import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.dependencies import (
    get_job_or_404,
    require_job_owner,
    require_not_applied,
    require_role,
    require_user,
)
from jobboard.models.application import Application
from jobboard.models.job import Job
from jobboard.models.user import User
from jobboard.schemas.application import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationWithSeekerResponse,
)
from jobboard.schemas.job import JobCreate, JobDetailResponse, JobResponse, JobUpdate
from jobboard.schemas.user import user_to_summary
from jobboard.services import storage
from jobboard.services.job_service import list_active_jobs
from jobboard.services.storage import StorageError
from jobboard.utils.clock import to_iso

logger = logging.getLogger("jobboard.jobs")

router = APIRouter(prefix="/jobs", tags=["jobs"])

require_employer = require_role("employer", detail="Only employers can post jobs")


def _job_to_detail(job: Job) -> JobDetailResponse:
    return JobDetailResponse(
        **JobResponse.model_validate(job).model_dump(),
        employer=user_to_summary(job.employer) if job.employer is not None else None,
    )


def _application_with_seeker(application: Application) -> ApplicationWithSeekerResponse:
    return ApplicationWithSeekerResponse(
        **ApplicationResponse.model_validate(application).model_dump(),
        job_seeker=user_to_summary(application.job_seeker),
    )


@router.get("", response_model=list[JobResponse])
async def list_jobs(
    location: str | None = None,
    job_type: str | None = Query(None, alias="jobType"),
    min_salary: float | None = Query(None, alias="minSalary"),
    max_salary: float | None = Query(None, alias="maxSalary"),
    search: str | None = None,
    db: Session = Depends(get_db),
):
    return list_active_jobs(
        db,
        location=location,
        job_type=job_type,
        min_salary=min_salary,
        max_salary=max_salary,
        search=search,
    )


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job: Job = Depends(get_job_or_404)):
    return _job_to_detail(job)


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    req: JobCreate,
    employer: User = Depends(require_employer),
    db: Session = Depends(get_db),
):
    values = req.model_dump()
    if req.expires_at is not None:
        values["expires_at"] = to_iso(req.expires_at)

    job = storage.jobs.insert(db, employer_id=employer.id, **values)
    logger.info("Employer id=%s posted job id=%s", employer.id, job.id)
    return job


@router.put("/{job_id}", response_model=JobResponse)
async def update_job(
    req: JobUpdate,
    job: Job = Depends(require_job_owner),
    db: Session = Depends(get_db),
):
    partial = req.model_dump(exclude_unset=True)
    if partial.get("expires_at") is not None:
        partial["expires_at"] = to_iso(partial["expires_at"])

    return storage.jobs.update(db, job.id, **partial)


@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=201)
async def apply_for_job(
    req: ApplicationCreate | None = None,
    job: Job = Depends(require_not_applied),
    seeker: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    req = req or ApplicationCreate()
    try:
        application = storage.applications.insert(
            db,
            job_id=job.id,
            job_seeker_id=seeker.id,
            resume_url=str(req.resume_url) if req.resume_url is not None else None,
            cover_letter=req.cover_letter,
            status="applied",
            compatibility_score=settings.compatibility_placeholder,
        )
    except StorageError as exc:
        # A concurrent request inserted the same (job, seeker) pair first.
        raise HTTPException(status_code=400, detail="You have already applied for this job") from exc

    logger.info("User id=%s applied to job id=%s", seeker.id, job.id)
    return application


@router.get("/{job_id}/applications", response_model=list[ApplicationWithSeekerResponse])
async def list_job_applications(
    job: Job = Depends(require_job_owner),
    db: Session = Depends(get_db),
):
    applications = (
        db.query(Application)
        .filter(Application.job_id == job.id)
        .order_by(Application.applied_at.desc(), Application.id.desc())
        .all()
    )
    return [_application_with_seeker(a) for a in applications]


# Employer's own postings, including inactive ones
employer_router = APIRouter(prefix="/employer", tags=["jobs"])


@employer_router.get("/jobs", response_model=list[JobResponse])
async def list_own_jobs(employer: User = Depends(require_employer), db: Session = Depends(get_db)):
    return (
        db.query(Job)
        .filter(Job.employer_id == employer.id)
        .order_by(Job.posted_at.desc(), Job.id.desc())
        .all()
    )
