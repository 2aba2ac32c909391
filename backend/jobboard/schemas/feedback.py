from typing import Literal

from pydantic import Field

from jobboard.schemas.base import CamelModel

FeedbackType = Literal["bug", "feature", "complaint", "other"]
FeedbackStatus = Literal["pending", "in_progress", "resolved"]


class FeedbackCreate(CamelModel):
    type: FeedbackType
    content: str = Field(min_length=10)


class FeedbackUpdate(CamelModel):
    status: FeedbackStatus = None
    admin_response: str | None = None


class FeedbackResponse(CamelModel):
    id: int
    user_id: int
    type: FeedbackType
    content: str
    status: FeedbackStatus
    admin_response: str | None
    submitted_at: str
    updated_at: str
