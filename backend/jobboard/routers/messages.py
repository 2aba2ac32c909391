from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from jobboard.database import get_db
from jobboard.dependencies import require_user
from jobboard.models.message import Message
from jobboard.models.user import User
from jobboard.schemas.message import MessageCreate, MessageResponse
from jobboard.services import storage

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("", response_model=MessageResponse, status_code=201)
async def send_message(
    req: MessageCreate,
    sender: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    if storage.users.get(db, req.receiver_id) is None:
        raise HTTPException(status_code=404, detail="Receiver not found")
    return storage.messages.insert(
        db, sender_id=sender.id, receiver_id=req.receiver_id, content=req.content,
    )


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    box: str = Query("inbox", pattern="^(inbox|sent)$"),
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    query = db.query(Message)
    if box == "inbox":
        query = query.filter(Message.receiver_id == user.id)
    else:
        query = query.filter(Message.sender_id == user.id)
    return query.order_by(Message.sent_at.desc(), Message.id.desc()).all()


@router.put("/{message_id}/read", response_model=MessageResponse)
async def mark_read(
    message_id: int,
    user: User = Depends(require_user),
    db: Session = Depends(get_db),
):
    message = storage.messages.get(db, message_id)
    if message is None:
        raise HTTPException(status_code=404, detail="Message not found")
    if message.receiver_id != user.id:
        raise HTTPException(status_code=403, detail="Only the receiver can mark a message read")
    return storage.messages.update(db, message.id, is_read=True)
