from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Session(Base):
    __tablename__ = "sessions"

    token = Column(Text, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(Text, nullable=False)
    expires_at = Column(Text, nullable=False)

    user = relationship("User")
