from pydantic import Field

from jobboard.schemas.base import CamelModel


class MessageCreate(CamelModel):
    receiver_id: int
    content: str = Field(min_length=1)


class MessageResponse(CamelModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    is_read: bool
    sent_at: str
