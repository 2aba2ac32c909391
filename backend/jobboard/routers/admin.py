import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_admin
from jobboard.models.user import User
from jobboard.schemas.user import UserResponse, UserStatusUpdate, user_to_response
from jobboard.services import storage
from jobboard.services.session_service import session_service

logger = logging.getLogger("jobboard.admin")

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/users", response_model=list[UserResponse])
async def list_users(
    role: str | None = Query(None, pattern="^(job_seeker|employer|admin)$"),
    db: Session = Depends(get_db),
):
    query = db.query(User)
    if role:
        query = query.filter(User.role == role)
    return [user_to_response(u) for u in query.order_by(User.id).all()]


@router.put("/users/{user_id}/status", response_model=UserResponse)
async def set_user_status(
    user_id: int,
    req: UserStatusUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    if user_id == admin.id and req.status == "suspended":
        raise HTTPException(status_code=400, detail="Admins cannot suspend themselves")
    user = storage.users.update(db, user_id, status=req.status)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    if user.status == "suspended":
        revoked = session_service.revoke_user(db, user.id)
        logger.info("Suspended user id=%s, closed %d session(s)", user.id, revoked)
    return user_to_response(user)
