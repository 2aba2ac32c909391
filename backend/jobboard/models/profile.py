from sqlalchemy import JSON, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class JobSeekerProfile(Base):
    __tablename__ = "job_seeker_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    phone = Column(Text)
    location = Column(Text)
    bio = Column(Text)
    resume_url = Column(Text)
    skills = Column(JSON)
    education = Column(JSON)
    experience = Column(JSON)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    user = relationship("User", back_populates="job_seeker_profile")


class EmployerProfile(Base):
    __tablename__ = "employer_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True)
    company_name = Column(Text, nullable=False)
    industry = Column(Text, nullable=False)
    company_size = Column(Text)
    location = Column(Text)
    website = Column(Text)
    description = Column(Text)
    logo_url = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    user = relationship("User", back_populates="employer_profile")
