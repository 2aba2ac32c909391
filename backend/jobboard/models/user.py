from sqlalchemy import Boolean, Column, Integer, Text
from sqlalchemy.orm import relationship
from jobboard.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(Text, nullable=False, unique=True)
    password = Column(Text, nullable=False)
    email = Column(Text, nullable=False, unique=True)
    role = Column(Text, nullable=False, default="job_seeker")
    profile_completed = Column(Boolean, nullable=False, default=False)
    status = Column(Text, nullable=False, default="active")
    created_at = Column(Text, nullable=False)

    job_seeker_profile = relationship("JobSeekerProfile", back_populates="user", uselist=False)
    employer_profile = relationship("EmployerProfile", back_populates="user", uselist=False)

    @property
    def profile(self):
        """The profile matching the user's role, if one was filled in."""
        if self.role == "job_seeker":
            return self.job_seeker_profile
        if self.role == "employer":
            return self.employer_profile
        return None
