"""
Feedback Analysis API
Main FastAPI Application
"""
import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from feedback_api import __version__
from feedback_api.config import settings
from feedback_api.api import auth, search_history, user
from feedback_api.database import init_db, dispose_engine
from feedback_api.exceptions import FeedbackAPIError
from feedback_api.middleware import PreflightCORSMiddleware

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    """Configure root logging from LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # SQL echo is switched on separately by DEBUG
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown events."""
    # Startup
    setup_logging()
    await init_db()
    logger.info("Feedback Analysis API started (env=%s)", settings.app_env)
    yield
    # Shutdown
    await dispose_engine()


app = FastAPI(
    title="Feedback Analysis API",
    description="User auth and per-user search history",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    PreflightCORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


# --- Exception Handlers ---

@app.exception_handler(FeedbackAPIError)
async def handle_app_error(request: Request, exc: FeedbackAPIError):
    """Application errors carry their own status code and safe message."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s %s",
            request.method, request.url.path, exc.message, exc.context,
            exc_info=exc.__cause__ or exc
        )
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.message},
        headers=headers
    )


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    """Unparseable bodies are a plain 400, like the other input errors."""
    logger.info("%s %s invalid body: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request body"})


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    """Anything else: log it, return a generic 500."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# Include routers
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(search_history.router, prefix="/api/search-history", tags=["Search History"])
app.include_router(user.router, prefix="/api", tags=["User"])


@app.get("/")
async def root():
    """Liveness message."""
    return {"message": "🚀 Feedback Analysis API is live!"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "version": __version__,
        "service": "feedback-api"
    }
