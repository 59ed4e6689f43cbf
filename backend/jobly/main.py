from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobly.api import auth, jobs
from jobly.bootstrap import configure_logging, ensure_admin_user
from jobly.config import settings
from jobly.database import Base, engine
from jobly.errors import ExpressError, validation_messages
from jobly.models import company, job, user  # noqa: F401


logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)


@app.on_event("startup")
def on_startup() -> None:
    configure_logging()
    settings.ensure_directories()
    Base.metadata.create_all(bind=engine)
    ensure_admin_user(engine)


def _error_response(message, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


@app.exception_handler(ExpressError)
async def handle_express_error(request: Request, exc: ExpressError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = validation_messages(exc.errors())
    logger.info("%s %s -> 400: %s", request.method, request.url.path, messages)
    return _error_response(messages, status.HTTP_400_BAD_REQUEST)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


app.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
app.include_router(auth.router, prefix="/auth", tags=["auth"])
