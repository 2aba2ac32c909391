import sqlite3
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from jobboard.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


SCHEMA_SQL = """\
-- ============================================================
-- USERS
-- ============================================================
CREATE TABLE IF NOT EXISTS users (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    username          TEXT NOT NULL UNIQUE,
    password          TEXT NOT NULL,
    email             TEXT NOT NULL UNIQUE,
    role              TEXT NOT NULL DEFAULT 'job_seeker'
                      CHECK(role IN ('job_seeker','employer','admin')),
    profile_completed INTEGER NOT NULL DEFAULT 0,
    status            TEXT NOT NULL DEFAULT 'active'
                      CHECK(status IN ('active','suspended')),
    created_at        TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_users_role ON users(role);

-- ============================================================
-- SESSIONS
-- ============================================================
CREATE TABLE IF NOT EXISTS sessions (
    token      TEXT PRIMARY KEY,
    user_id    INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    created_at TEXT NOT NULL,
    expires_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_sessions_user ON sessions(user_id);
CREATE INDEX IF NOT EXISTS idx_sessions_expires ON sessions(expires_at);

-- ============================================================
-- PROFILES
-- ============================================================
CREATE TABLE IF NOT EXISTS job_seeker_profiles (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id    INTEGER NOT NULL UNIQUE REFERENCES users(id),
    first_name TEXT NOT NULL,
    last_name  TEXT NOT NULL,
    phone      TEXT,
    location   TEXT,
    bio        TEXT,
    resume_url TEXT,
    skills     TEXT,
    education  TEXT,
    experience TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS employer_profiles (
    id           INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id      INTEGER NOT NULL UNIQUE REFERENCES users(id),
    company_name TEXT NOT NULL,
    industry     TEXT NOT NULL,
    company_size TEXT,
    location     TEXT,
    website      TEXT,
    description  TEXT,
    logo_url     TEXT,
    created_at   TEXT NOT NULL,
    updated_at   TEXT NOT NULL
);

-- ============================================================
-- JOBS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id               INTEGER PRIMARY KEY AUTOINCREMENT,
    employer_id      INTEGER NOT NULL REFERENCES users(id),
    title            TEXT NOT NULL,
    description      TEXT NOT NULL,
    qualifications   TEXT NOT NULL,
    responsibilities TEXT NOT NULL,
    location         TEXT NOT NULL,
    job_type         TEXT NOT NULL
                     CHECK(job_type IN ('full-time','part-time','contract','internship')),
    salary_min       REAL,
    salary_max       REAL,
    skills           TEXT,
    is_active        INTEGER NOT NULL DEFAULT 1,
    posted_at        TEXT NOT NULL,
    expires_at       TEXT,
    updated_at       TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_jobs_employer ON jobs(employer_id);
CREATE INDEX IF NOT EXISTS idx_jobs_active_posted ON jobs(is_active, posted_at);
CREATE INDEX IF NOT EXISTS idx_jobs_type ON jobs(job_type);

-- ============================================================
-- APPLICATIONS
-- ============================================================
CREATE TABLE IF NOT EXISTS applications (
    id                  INTEGER PRIMARY KEY AUTOINCREMENT,
    job_id              INTEGER NOT NULL REFERENCES jobs(id),
    job_seeker_id       INTEGER NOT NULL REFERENCES users(id),
    resume_url          TEXT,
    cover_letter        TEXT,
    status              TEXT NOT NULL DEFAULT 'applied'
                        CHECK(status IN ('applied','reviewed','interviewing','offered','rejected')),
    compatibility_score REAL,
    applied_at          TEXT NOT NULL,
    updated_at          TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_applications_job ON applications(job_id);
CREATE UNIQUE INDEX IF NOT EXISTS idx_applications_job_seeker
    ON applications(job_id, job_seeker_id);

-- ============================================================
-- WISHLISTS / WATCHLISTS
-- ============================================================
CREATE TABLE IF NOT EXISTS wishlists (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    job_id        INTEGER NOT NULL REFERENCES jobs(id),
    job_seeker_id INTEGER NOT NULL REFERENCES users(id),
    added_at      TEXT NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_wishlists_job_seeker
    ON wishlists(job_id, job_seeker_id);

CREATE TABLE IF NOT EXISTS watchlists (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    employer_id   INTEGER NOT NULL REFERENCES users(id),
    job_seeker_id INTEGER NOT NULL REFERENCES users(id),
    notes         TEXT,
    added_at      TEXT NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_watchlists_employer_seeker
    ON watchlists(employer_id, job_seeker_id);

-- ============================================================
-- MESSAGES
-- ============================================================
CREATE TABLE IF NOT EXISTS messages (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    sender_id   INTEGER NOT NULL REFERENCES users(id),
    receiver_id INTEGER NOT NULL REFERENCES users(id),
    content     TEXT NOT NULL,
    is_read     INTEGER NOT NULL DEFAULT 0,
    sent_at     TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_messages_receiver ON messages(receiver_id);
CREATE INDEX IF NOT EXISTS idx_messages_sender ON messages(sender_id);

-- ============================================================
-- FEEDBACK
-- ============================================================
CREATE TABLE IF NOT EXISTS feedback (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id        INTEGER NOT NULL REFERENCES users(id),
    type           TEXT NOT NULL CHECK(type IN ('bug','feature','complaint','other')),
    content        TEXT NOT NULL,
    status         TEXT NOT NULL DEFAULT 'pending'
                   CHECK(status IN ('pending','in_progress','resolved')),
    admin_response TEXT,
    submitted_at   TEXT NOT NULL,
    updated_at     TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_feedback_user ON feedback(user_id);
"""

# Child tables first so foreign keys never dangle mid-reset.
TABLES = [
    "sessions",
    "feedback",
    "messages",
    "watchlists",
    "wishlists",
    "applications",
    "jobs",
    "employer_profiles",
    "job_seeker_profiles",
    "users",
]


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    conn.close()


def reset_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    conn = sqlite3.connect(str(path))
    for table in TABLES:
        conn.execute(f"DELETE FROM {table}")
    conn.execute("DELETE FROM sqlite_sequence")
    conn.commit()
    conn.close()
