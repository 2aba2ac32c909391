from jobboard.schemas.base import CamelModel
from jobboard.schemas.job import JobResponse
from jobboard.schemas.user import UserSummary


class WishlistCreate(CamelModel):
    job_id: int


class WishlistResponse(CamelModel):
    id: int
    job_id: int
    job_seeker_id: int
    added_at: str
    job: JobResponse


class WatchlistCreate(CamelModel):
    job_seeker_id: int
    notes: str | None = None


class WatchlistUpdate(CamelModel):
    notes: str | None = None


class WatchlistResponse(CamelModel):
    id: int
    employer_id: int
    job_seeker_id: int
    notes: str | None
    added_at: str
    job_seeker: UserSummary
