from sqlalchemy import Column, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False)
    job_seeker_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    resume_url = Column(Text)
    cover_letter = Column(Text)
    status = Column(Text, nullable=False, default="applied")
    compatibility_score = Column(Float)
    applied_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    job = relationship("Job", back_populates="applications")
    job_seeker = relationship("User")
