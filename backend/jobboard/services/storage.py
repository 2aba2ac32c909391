"""
Per-entity read/write accessors.

Every write is a single commit. A write the database refuses (duplicate
unique field, broken foreign key) rolls back and surfaces as StorageError.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobboard.models import (
    Application,
    EmployerProfile,
    Feedback,
    Job,
    JobSeekerProfile,
    Message,
    User,
    Watchlist,
    Wishlist,
)
from jobboard.utils.clock import utcnow_iso

logger = logging.getLogger("jobboard.storage")


class StorageError(Exception):
    pass


class EntityStore:
    def __init__(self, model, created_field: str | None = None, updated_field: str | None = None):
        self.model = model
        self.created_field = created_field
        self.updated_field = updated_field

    def get(self, db: Session, entity_id: int):
        return db.get(self.model, entity_id)

    def get_by(self, db: Session, field: str, value):
        return db.query(self.model).filter(getattr(self.model, field) == value).first()

    def insert(self, db: Session, **values):
        now = utcnow_iso()
        if self.created_field:
            values.setdefault(self.created_field, now)
        if self.updated_field:
            values.setdefault(self.updated_field, now)
        record = self.model(**values)
        db.add(record)
        self._commit(db)
        db.refresh(record)
        return record

    def update(self, db: Session, entity_id: int, **partial):
        record = self.get(db, entity_id)
        if record is None:
            return None
        for key, value in partial.items():
            setattr(record, key, value)
        if self.updated_field:
            setattr(record, self.updated_field, utcnow_iso())
        self._commit(db)
        db.refresh(record)
        return record

    def _commit(self, db: Session):
        try:
            db.commit()
        except IntegrityError as exc:
            db.rollback()
            logger.warning("%s write rejected: %s", self.model.__tablename__, exc.orig)
            raise StorageError(f"{self.model.__tablename__} write rejected") from exc


users = EntityStore(User, created_field="created_at")
job_seeker_profiles = EntityStore(JobSeekerProfile, created_field="created_at", updated_field="updated_at")
employer_profiles = EntityStore(EmployerProfile, created_field="created_at", updated_field="updated_at")
jobs = EntityStore(Job, created_field="posted_at", updated_field="updated_at")
applications = EntityStore(Application, created_field="applied_at", updated_field="updated_at")
wishlists = EntityStore(Wishlist, created_field="added_at")
watchlists = EntityStore(Watchlist, created_field="added_at")
messages = EntityStore(Message, created_field="sent_at")
feedback = EntityStore(Feedback, created_field="submitted_at", updated_field="updated_at")
