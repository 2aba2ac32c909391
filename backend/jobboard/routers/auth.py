import logging

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from jobboard.config import settings
from jobboard.database import get_db
from jobboard.dependencies import require_user
from jobboard.models.user import User
from jobboard.schemas.user import LoginRequest, UserCreate, UserResponse, user_to_response
from jobboard.services import storage
from jobboard.services.session_service import session_service
from jobboard.utils.security import hash_password

logger = logging.getLogger("jobboard.auth")

router = APIRouter(tags=["auth"])


def _set_session_cookie(response: Response, token: str):
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(req: UserCreate, response: Response, db: Session = Depends(get_db)):
    if req.role == "admin" and not settings.allow_admin_registration:
        raise HTTPException(status_code=403, detail="Admin accounts cannot be self-registered")
    if storage.users.get_by(db, "username", req.username):
        raise HTTPException(status_code=400, detail="Username already exists")
    if storage.users.get_by(db, "email", req.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = storage.users.insert(
        db,
        username=req.username,
        password=hash_password(req.password),
        email=req.email,
        role=req.role,
    )
    logger.info("Registered user id=%s role=%s", user.id, user.role)

    session = session_service.create(db, user)
    _set_session_cookie(response, session.token)
    return user_to_response(user)


@router.post("/login", response_model=UserResponse)
async def login(req: LoginRequest, response: Response, db: Session = Depends(get_db)):
    user = session_service.authenticate(db, req.username, req.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")

    session = session_service.create(db, user)
    _set_session_cookie(response, session.token)
    return user_to_response(user)


@router.post("/logout")
async def logout(
    response: Response,
    session_token: str | None = Cookie(None, alias=settings.session_cookie_name),
    db: Session = Depends(get_db),
):
    if session_token:
        session_service.revoke(db, session_token)
    response.delete_cookie(settings.session_cookie_name)
    return {"message": "Logged out"}


@router.get("/user", response_model=UserResponse)
async def current_user(user: User = Depends(require_user)):
    return user_to_response(user)
