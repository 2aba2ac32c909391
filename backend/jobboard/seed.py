"""
Seed the database with demo users, profiles and jobs.

Usage:
    python -m jobboard.seed [--reset] [--db PATH]

Seeding is skipped when users already exist, unless --reset truncates
every table first.
"""
import argparse
import logging
from pathlib import Path

from sqlalchemy.orm import Session, sessionmaker

from jobboard.config import settings
from jobboard.database import get_engine, init_db, reset_db
from jobboard.logging_config import setup_logging
from jobboard.models.user import User
from jobboard.services import storage
from jobboard.utils.clock import utcnow_iso
from jobboard.utils.security import hash_password

logger = logging.getLogger("jobboard.seed")

DAY = 24 * 3600
DEMO_PASSWORD = "password123"

EMPLOYERS = [
    {
        "username": "techcorp",
        "email": "hr@techcorp.com",
        "profile": {
            "company_name": "Tech Corp",
            "industry": "Information Technology",
            "company_size": "1000-5000",
            "location": "San Francisco, CA",
            "website": "https://techcorp.example.com",
            "description": "A leading technology company specializing in innovative software solutions.",
        },
        "jobs": [
            {
                "title": "Senior Frontend Developer",
                "description": "We're looking for an experienced frontend developer to join our team "
                               "and help build cutting-edge web applications for our clients.",
                "qualifications": "5+ years of experience with modern JavaScript frameworks and web "
                                  "performance optimization.",
                "responsibilities": "Design and implement user interfaces, collaborate with UX designers, "
                                    "mentor junior developers.",
                "location": "San Francisco, CA",
                "job_type": "full-time",
                "salary_min": 120000,
                "salary_max": 160000,
                "skills": ["React", "TypeScript", "CSS", "HTML", "Redux"],
                "expires_in_days": 30,
            },
            {
                "title": "DevOps Engineer",
                "description": "Join our infrastructure team to help us build and maintain scalable "
                               "cloud solutions for our growing products.",
                "qualifications": "Experience with AWS or Azure, containerization, CI/CD pipelines and "
                                  "infrastructure as code.",
                "responsibilities": "Maintain CI/CD pipelines, manage cloud infrastructure, optimize "
                                    "performance and costs.",
                "location": "Remote",
                "job_type": "full-time",
                "salary_min": 130000,
                "salary_max": 170000,
                "skills": ["AWS", "Docker", "Kubernetes", "Terraform", "Jenkins"],
                "expires_in_days": 45,
            },
        ],
    },
    {
        "username": "innovate_inc",
        "email": "careers@innovateinc.com",
        "profile": {
            "company_name": "Innovate Inc",
            "industry": "Software Development",
            "company_size": "100-500",
            "location": "Austin, TX",
            "website": "https://innovateinc.example.com",
            "description": "Startup focused on cutting-edge AI applications and machine learning solutions.",
        },
        "jobs": [
            {
                "title": "Machine Learning Engineer",
                "description": "Build and ship machine learning models that power our AI products, "
                               "from research prototypes to production services.",
                "qualifications": "Strong Python skills and hands-on experience with TensorFlow or PyTorch.",
                "responsibilities": "Train, evaluate and deploy models; work with data engineers on "
                                    "feature pipelines.",
                "location": "Austin, TX",
                "job_type": "full-time",
                "salary_min": 140000,
                "salary_max": 180000,
                "skills": ["Python", "TensorFlow", "PyTorch", "NLP", "Computer Vision"],
                "expires_in_days": 60,
            },
            {
                "title": "Mobile Developer (iOS)",
                "description": "Join our mobile team to develop innovative iOS applications using Swift "
                               "and modern architecture patterns.",
                "qualifications": "Experience with iOS development using Swift and iOS design patterns.",
                "responsibilities": "Design and develop iOS applications, implement UI/UX designs, "
                                    "collaborate with backend teams.",
                "location": "Remote",
                "job_type": "contract",
                "salary_min": 70,
                "salary_max": 90,
                "skills": ["Swift", "UIKit", "SwiftUI", "Core Data", "iOS"],
                "expires_in_days": 60,
            },
        ],
    },
    {
        "username": "globalfirm",
        "email": "jobs@globalfirm.com",
        "profile": {
            "company_name": "Global Firm",
            "industry": "Finance",
            "company_size": "5000+",
            "location": "New York, NY",
            "website": "https://globalfirm.example.com",
            "description": "Multinational financial services corporation with a strong tech division.",
        },
        "jobs": [
            {
                "title": "Data Analyst Intern",
                "description": "Support the analytics team with reporting, dashboards and ad hoc "
                               "analysis of trading data.",
                "qualifications": "Coursework in statistics or computer science, SQL and spreadsheet skills.",
                "responsibilities": "Prepare weekly reports, clean data sets, present findings to the team.",
                "location": "New York, NY",
                "job_type": "internship",
                "salary_min": 25,
                "salary_max": 35,
                "skills": ["SQL", "Excel", "Python"],
                "expires_in_days": 30,
            },
        ],
    },
]

JOB_SEEKERS = [
    {
        "username": "jobseeker1",
        "email": "seeker1@example.com",
        "profile": {
            "first_name": "John",
            "last_name": "Doe",
            "phone": "555-123-4567",
            "location": "Chicago, IL",
            "bio": "Experienced software engineer with a passion for web development.",
            "resume_url": "https://example.com/resume/johndoe",
            "skills": ["JavaScript", "React", "Node.js", "Python"],
            "education": [{"degree": "B.S. Computer Science", "institution": "University of Illinois", "year": "2018"}],
            "experience": [{"title": "Software Engineer", "company": "Previous Tech",
                            "startDate": "2018-06", "endDate": "2021-12"}],
        },
    },
    {
        "username": "devhunter",
        "email": "dev@example.com",
        "profile": {
            "first_name": "Jane",
            "last_name": "Smith",
            "phone": "555-987-6543",
            "location": "Seattle, WA",
            "bio": "Full-stack developer specializing in modern JavaScript frameworks.",
            "resume_url": "https://example.com/resume/janesmith",
            "skills": ["TypeScript", "Angular", "Express", "MongoDB"],
            "education": [{"degree": "M.S. Software Engineering", "institution": "University of Washington",
                           "year": "2020"}],
            "experience": [{"title": "Senior Developer", "company": "Web Solutions Inc",
                            "startDate": "2020-01", "endDate": None}],
        },
    },
    {
        "username": "designer_pro",
        "email": "design@example.com",
        "profile": {
            "first_name": "Michael",
            "last_name": "Johnson",
            "phone": "555-456-7890",
            "location": "Los Angeles, CA",
            "bio": "UI/UX designer with coding skills and a keen eye for user experience.",
            "resume_url": "https://example.com/resume/mjohnson",
            "skills": ["UI/UX Design", "Figma", "Adobe XD", "CSS", "JavaScript"],
            "education": [{"degree": "B.A. Graphic Design", "institution": "California Arts Institute",
                           "year": "2019"}],
            "experience": [{"title": "UI Designer", "company": "Creative Agency",
                            "startDate": "2019-03", "endDate": "2022-01"}],
        },
    },
]


def _create_user(db: Session, username: str, email: str, role: str, password: str = DEMO_PASSWORD) -> User:
    user = storage.users.insert(
        db,
        username=username,
        password=hash_password(password),
        email=email,
        role=role,
    )
    logger.info("Created %s user: %s", role, username)
    return user


def seed(db: Session) -> bool:
    """Insert the demo data set. Returns False when users already exist."""
    if db.query(User).first() is not None:
        logger.info("Users already exist, skipping seed data")
        return False

    _create_user(db, "admin", "admin@jobportal.com", "admin", password="admin123")

    for employer in EMPLOYERS:
        user = _create_user(db, employer["username"], employer["email"], "employer")
        storage.employer_profiles.insert(db, user_id=user.id, **employer["profile"])
        storage.users.update(db, user.id, profile_completed=True)
        for job in employer["jobs"]:
            job = dict(job)
            expires_in_days = job.pop("expires_in_days")
            storage.jobs.insert(
                db,
                employer_id=user.id,
                is_active=True,
                expires_at=utcnow_iso(expires_in_days * DAY),
                **job,
            )
        logger.info("Seeded %d job(s) for %s", len(employer["jobs"]), employer["username"])

    for seeker in JOB_SEEKERS:
        user = _create_user(db, seeker["username"], seeker["email"], "job_seeker")
        storage.job_seeker_profiles.insert(db, user_id=user.id, **seeker["profile"])
        storage.users.update(db, user.id, profile_completed=True)

    return True


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Seed the job board database with demo data")
    parser.add_argument("--reset", action="store_true", help="Truncate every table before seeding")
    parser.add_argument("--db", type=Path, help="Path of the sqlite database (default: configured data dir)")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    db_path = args.db or settings.db_path
    db_path.parent.mkdir(parents=True, exist_ok=True)
    init_db(db_path)
    if args.reset:
        reset_db(db_path)
        logger.info("Truncated all tables")

    SessionFactory = sessionmaker(bind=get_engine(db_path), autoflush=False, autocommit=False)
    db = SessionFactory()
    try:
        seed(db)
    finally:
        db.close()
    logger.info("Database seeding completed")


if __name__ == "__main__":
    main()
