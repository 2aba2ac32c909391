from sqlalchemy import or_
from sqlalchemy.orm import Session

from jobboard.models.job import Job
from jobboard.utils.clock import utcnow_iso

# Filter value the client sends for "no constraint".
ANY = "all"


def active_clause(now: str | None = None):
    now = now or utcnow_iso()
    return (Job.is_active.is_(True)) & (Job.expires_at.is_(None) | (Job.expires_at > now))


def is_accepting_applications(job: Job, now: str | None = None) -> bool:
    now = now or utcnow_iso()
    if not job.is_active:
        return False
    return job.expires_at is None or job.expires_at > now


def list_active_jobs(
    db: Session,
    location: str | None = None,
    job_type: str | None = None,
    min_salary: float | None = None,
    max_salary: float | None = None,
    search: str | None = None,
) -> list[Job]:
    """Active jobs matching every given filter, newest first.

    Unset filters impose no constraint. Salary bounds are inclusive and
    exclude jobs that leave the compared bound empty.
    """
    query = db.query(Job).filter(active_clause())

    if location and location != ANY:
        query = query.filter(Job.location.icontains(location, autoescape=True))
    if job_type and job_type != ANY:
        query = query.filter(Job.job_type == job_type)
    if min_salary is not None:
        query = query.filter(Job.salary_min >= min_salary)
    if max_salary is not None:
        query = query.filter(Job.salary_max <= max_salary)
    if search:
        query = query.filter(
            or_(
                Job.title.icontains(search, autoescape=True),
                Job.description.icontains(search, autoescape=True),
            )
        )

    return query.order_by(Job.posted_at.desc(), Job.id.desc()).all()
