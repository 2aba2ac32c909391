import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobboard.config import settings
from jobboard.logging_config import setup_logging
from jobboard.routers import admin, applications, auth, feedback, jobs, lists, messages, profiles

VERSION = "0.1.0"

logger = logging.getLogger("jobboard")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_file)
    from jobboard.database import SessionLocal, init_db
    from jobboard.services.session_service import session_service

    settings.data_dir.mkdir(parents=True, exist_ok=True)
    init_db(settings.db_path)
    logger.info("Schema ready at %s", settings.db_path)

    db = SessionLocal()
    try:
        purged = session_service.purge_expired(db)
    finally:
        db.close()
    if purged:
        logger.info("Purged %d expired session(s)", purged)
    yield


app = FastAPI(
    title="Job Board",
    description="Job postings, applications and employer review",
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": "Validation failed", "errors": errors})


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


app.include_router(auth.router, prefix=settings.api_prefix)
app.include_router(profiles.router, prefix=settings.api_prefix)
app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(jobs.employer_router, prefix=settings.api_prefix)
app.include_router(applications.router, prefix=settings.api_prefix)
app.include_router(lists.wishlist_router, prefix=settings.api_prefix)
app.include_router(lists.watchlist_router, prefix=settings.api_prefix)
app.include_router(messages.router, prefix=settings.api_prefix)
app.include_router(feedback.router, prefix=settings.api_prefix)
app.include_router(admin.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}
