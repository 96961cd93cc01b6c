"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.requests import Request
from starlette.responses import JSONResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from judging import __version__
from judging.api.resources import routers as resource_routers
from judging.api.support import router as support_router
from judging.db.database import dispose_engine, init_db
from judging.errors import JudgingError


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    dispose_engine()


app = FastAPI(
    title="Automated Judging Admin Service",
    description="API for managing judging events: event types, competitions, judges, participants and scoring criteria.",
    version=__version__,
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Accept"],
)


@app.exception_handler(JudgingError)
async def judging_error_handler(request: Request, exc: JudgingError):
    return JSONResponse(exc.to_payload(), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    msg = "Invalid request body"
    if errors:
        first = errors[0]
        fields = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
        if first.get("type") == "json_invalid":
            msg = "Request body is not valid JSON"
        elif fields:
            msg = f"Invalid value for {'.'.join(fields)}: {first.get('msg')}"
    logger.info("Rejected %s %s: %s", request.method, request.url.path, msg)
    return JSONResponse({"msg": msg}, status_code=400)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database Error: %s", exc)
    return JSONResponse({"msg": "Server error", "error": str(getattr(exc, "orig", None) or exc)}, status_code=500)


for resource_router in resource_routers:
    app.include_router(resource_router)
app.include_router(support_router)
