"""
AI Recruitment Assistant - Main Application

FastAPI backend with:
- Proxy endpoints in front of an OpenAI-compatible chat-completion API
- SQLAlchemy storage for users, saved JDs and questionnaire drafts
- JWT authentication
- Static frontend served from settings.frontend_dir

Run: uvicorn recruitai.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from recruitai import __version__
from recruitai.api.routes import api_router
from recruitai.core.config import Settings, get_settings
from recruitai.core.errors import RecruitAIError, ValidationFailed
from recruitai.core.log_config import AccessLogMiddleware, configure_logging, internal_error_response
from recruitai.core.rate_limit import BodySizeLimitMiddleware, GlobalRateLimiter, RateLimitMiddleware
from recruitai.db.database import init_db

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RecruitAIError)
    async def recruitai_error_handler(request: Request, exc: RecruitAIError):
        content = {"error": exc.message}
        if isinstance(exc, ValidationFailed):
            content["errors"] = exc.errors
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return internal_error_response(exc)


def create_app(settings: Settings = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        """Create tables and warn about missing provider credentials."""
        init_db()
        if not settings.openai_api_key:
            logger.warning("OPENAI_API_KEY is not set. Set it in .env")
        logger.info("AI Recruitment Assistant %s ready", __version__)
        yield

    app = FastAPI(
        title="AI Recruitment Assistant",
        description="""
        Questionnaire-driven job description generator.

        ## Features
        - **AI proxy**: JD generation, polishing and sourcing strategies
        - **Questionnaire**: scripted interview with conditional questions
        - **Authentication**: JWT-based accounts with bcrypt passwords
        - **Saved JDs**: per-user storage, polishing and plain-text download
        - **Drafts**: resume an unfinished questionnaire
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Added innermost first: CORS ends up outermost, the rate limiter innermost
    app.state.rate_limiter = GlobalRateLimiter(settings.rate_limit_interval_ms)
    app.add_middleware(RateLimitMiddleware, limiter=app.state.rate_limiter)
    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.allowed_origin != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    frontend_dir = os.path.abspath(settings.frontend_dir)
    if os.path.isdir(frontend_dir):
        app.mount("/static", StaticFiles(directory=frontend_dir), name="static")

    @app.get("/", tags=["Frontend"])
    async def serve_frontend():
        """Serve the frontend entry page when one is deployed."""
        index_path = os.path.join(frontend_dir, "index.html")
        if os.path.exists(index_path):
            return FileResponse(index_path)
        return {"status": "healthy", "app": "AI Recruitment Assistant", "message": "Frontend not found. API is running."}

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"ok": True}

    return app


app = create_app()
