from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_role
from jobboard.models.lists import Watchlist, Wishlist
from jobboard.models.user import User
from jobboard.schemas.job import JobResponse
from jobboard.schemas.lists import (
    WatchlistCreate,
    WatchlistResponse,
    WatchlistUpdate,
    WishlistCreate,
    WishlistResponse,
)
from jobboard.schemas.user import user_to_summary
from jobboard.services import storage

require_job_seeker = require_role("job_seeker", detail="Only job seekers can save jobs")
require_employer = require_role("employer", detail="Only employers can keep a watchlist")

wishlist_router = APIRouter(prefix="/wishlist", tags=["wishlist"])
watchlist_router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def _wishlist_to_response(entry: Wishlist) -> WishlistResponse:
    return WishlistResponse(
        id=entry.id,
        job_id=entry.job_id,
        job_seeker_id=entry.job_seeker_id,
        added_at=entry.added_at,
        job=JobResponse.model_validate(entry.job),
    )


def _watchlist_to_response(entry: Watchlist) -> WatchlistResponse:
    return WatchlistResponse(
        id=entry.id,
        employer_id=entry.employer_id,
        job_seeker_id=entry.job_seeker_id,
        notes=entry.notes,
        added_at=entry.added_at,
        job_seeker=user_to_summary(entry.job_seeker),
    )


@wishlist_router.post("", response_model=WishlistResponse, status_code=201)
async def save_job(
    req: WishlistCreate,
    seeker: User = Depends(require_job_seeker),
    db: Session = Depends(get_db),
):
    if storage.jobs.get(db, req.job_id) is None:
        raise HTTPException(status_code=404, detail="Job not found")
    existing = (
        db.query(Wishlist)
        .filter(Wishlist.job_id == req.job_id, Wishlist.job_seeker_id == seeker.id)
        .first()
    )
    if existing:
        raise HTTPException(status_code=400, detail="Job already in wishlist")

    entry = storage.wishlists.insert(db, job_id=req.job_id, job_seeker_id=seeker.id)
    return _wishlist_to_response(entry)


@wishlist_router.get("", response_model=list[WishlistResponse])
async def list_wishlist(seeker: User = Depends(require_job_seeker), db: Session = Depends(get_db)):
    entries = (
        db.query(Wishlist)
        .filter(Wishlist.job_seeker_id == seeker.id)
        .order_by(Wishlist.added_at.desc(), Wishlist.id.desc())
        .all()
    )
    return [_wishlist_to_response(e) for e in entries]


@watchlist_router.post("", response_model=WatchlistResponse, status_code=201)
async def watch_candidate(
    req: WatchlistCreate,
    employer: User = Depends(require_employer),
    db: Session = Depends(get_db),
):
    candidate = storage.users.get(db, req.job_seeker_id)
    if candidate is None:
        raise HTTPException(status_code=404, detail="User not found")
    if candidate.role != "job_seeker":
        raise HTTPException(status_code=400, detail="Only job seekers can be watched")
    existing = (
        db.query(Watchlist)
        .filter(Watchlist.employer_id == employer.id, Watchlist.job_seeker_id == candidate.id)
        .first()
    )
    if existing:
        raise HTTPException(status_code=400, detail="Candidate already in watchlist")

    entry = storage.watchlists.insert(
        db, employer_id=employer.id, job_seeker_id=candidate.id, notes=req.notes,
    )
    return _watchlist_to_response(entry)


@watchlist_router.get("", response_model=list[WatchlistResponse])
async def list_watchlist(employer: User = Depends(require_employer), db: Session = Depends(get_db)):
    entries = (
        db.query(Watchlist)
        .filter(Watchlist.employer_id == employer.id)
        .order_by(Watchlist.added_at.desc(), Watchlist.id.desc())
        .all()
    )
    return [_watchlist_to_response(e) for e in entries]


@watchlist_router.put("/{entry_id}", response_model=WatchlistResponse)
async def update_watchlist_notes(
    entry_id: int,
    req: WatchlistUpdate,
    employer: User = Depends(require_employer),
    db: Session = Depends(get_db),
):
    entry = storage.watchlists.get(db, entry_id)
    if entry is None:
        raise HTTPException(status_code=404, detail="Watchlist entry not found")
    if entry.employer_id != employer.id:
        raise HTTPException(status_code=403, detail="You don't have permission to edit this entry")
    entry = storage.watchlists.update(db, entry.id, notes=req.notes)
    return _watchlist_to_response(entry)
