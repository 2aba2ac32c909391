from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_admin, require_user
from jobboard.models.feedback import Feedback
from jobboard.models.user import User
from jobboard.schemas.feedback import FeedbackCreate, FeedbackResponse, FeedbackUpdate
from jobboard.services import storage

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", response_model=FeedbackResponse, status_code=201)
async def submit_feedback(
    req: FeedbackCreate,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    return storage.feedback.insert(db, user_id=user.id, type=req.type, content=req.content)


@router.get("", response_model=list[FeedbackResponse])
async def list_feedback(user: User = Depends(require_user), db: Session = Depends(get_db)):
    query = db.query(Feedback)
    if user.role != "admin":
        query = query.filter(Feedback.user_id == user.id)
    return query.order_by(Feedback.submitted_at.desc(), Feedback.id.desc()).all()


@router.put("/{feedback_id}", response_model=FeedbackResponse)
async def respond_to_feedback(
    feedback_id: int,
    req: FeedbackUpdate,
    _admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    if storage.feedback.get(db, feedback_id) is None:
        raise HTTPException(status_code=404, detail="Feedback not found")
    return storage.feedback.update(db, feedback_id, **req.model_dump(exclude_unset=True))
