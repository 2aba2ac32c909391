from sqlalchemy import JSON, Boolean, Column, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    employer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    qualifications = Column(Text, nullable=False)
    responsibilities = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    job_type = Column(Text, nullable=False)
    salary_min = Column(Float)
    salary_max = Column(Float)
    skills = Column(JSON)
    is_active = Column(Boolean, nullable=False, default=True)
    posted_at = Column(Text, nullable=False)
    expires_at = Column(Text)
    updated_at = Column(Text, nullable=False)

    employer = relationship("User")
    applications = relationship("Application", back_populates="job")
