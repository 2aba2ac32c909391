from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Wishlist(Base):
    __tablename__ = "wishlists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False)
    job_seeker_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    added_at = Column(Text, nullable=False)

    job = relationship("Job")


class Watchlist(Base):
    __tablename__ = "watchlists"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    job_seeker_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    notes = Column(Text)
    added_at = Column(Text, nullable=False)

    job_seeker = relationship("User", foreign_keys=[job_seeker_id])
