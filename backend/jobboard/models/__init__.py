from jobboard.models.user import User
from jobboard.models.session import Session
from jobboard.models.profile import JobSeekerProfile, EmployerProfile
from jobboard.models.job import Job
from jobboard.models.application import Application
from jobboard.models.lists import Wishlist, Watchlist
from jobboard.models.message import Message
from jobboard.models.feedback import Feedback

__all__ = [
    "User", "Session", "JobSeekerProfile", "EmployerProfile", "Job",
    "Application", "Wishlist", "Watchlist", "Message", "Feedback",
]
