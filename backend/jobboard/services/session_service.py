import logging

from sqlalchemy.orm import Session as DbSession

from jobboard.config import settings
from jobboard.models.session import Session
from jobboard.models.user import User
from jobboard.utils.clock import utcnow_iso
from jobboard.utils.security import (
    generate_token,
    hash_password,
    password_needs_rehash,
    verify_password,
)

logger = logging.getLogger("jobboard.sessions")


class SessionService:
    """Login sessions persisted in the sessions table, keyed by cookie token."""

    def authenticate(self, db: DbSession, username: str, password: str) -> User | None:
        user = db.query(User).filter(User.username == username).first()
        if user is None or not verify_password(user.password, password):
            logger.warning("Failed login for username=%r", username)
            return None
        if user.status != "active":
            logger.warning("Login refused for suspended user id=%s", user.id)
            return None
        if password_needs_rehash(user.password):
            user.password = hash_password(password)
            db.commit()
            logger.info("Upgraded password hash for user id=%s", user.id)
        return user

    def create(self, db: DbSession, user: User) -> Session:
        session = Session(
            token=generate_token(),
            user_id=user.id,
            created_at=utcnow_iso(),
            expires_at=utcnow_iso(settings.session_ttl_seconds),
        )
        db.add(session)
        db.commit()
        logger.info("Session opened for user id=%s", user.id)
        return session

    def resolve(self, db: DbSession, token: str) -> User | None:
        session = db.get(Session, token)
        if session is None:
            return None
        if session.expires_at <= utcnow_iso():
            db.delete(session)
            db.commit()
            return None
        user = session.user
        if user is None or user.status != "active":
            return None
        return user

    def revoke(self, db: DbSession, token: str):
        session = db.get(Session, token)
        if session is not None:
            db.delete(session)
            db.commit()

    def revoke_user(self, db: DbSession, user_id: int) -> int:
        count = db.query(Session).filter(Session.user_id == user_id).delete()
        db.commit()
        return count

    def purge_expired(self, db: DbSession) -> int:
        count = db.query(Session).filter(Session.expires_at <= utcnow_iso()).delete()
        db.commit()
        return count


session_service = SessionService()
