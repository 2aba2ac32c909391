from sqlalchemy import Column, ForeignKey, Integer, Text
from jobboard.database import Base


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    type = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    status = Column(Text, nullable=False, default="pending")
    admin_response = Column(Text)
    submitted_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)
