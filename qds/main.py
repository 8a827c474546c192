"""
Qatar Digital Solutions API
===========================
Content and admin backend for the company website

Serves:
1. Public content: portfolio, services, testimonials, blog and careers
2. Lead capture: contact form and job applications
3. Fire-and-forget analytics counters (page views, WhatsApp clicks)
4. A password-gated admin area behind a server-side session
"""
import logging
import secrets
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from qds.core.config import settings
from qds.core.database import SessionLocal, init_db
from qds.core.errors import register_error_handlers
from qds.core.logging import setup_logging
from qds.core.security import purge_expired_sessions
from qds.services.seed import seed_default_content
from qds.api import api_router

logger = logging.getLogger("qds")

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)
    if not settings.ADMIN_PASSWORD:
        logger.warning("ADMIN_PASSWORD is not set; admin login is disabled")

    init_db()
    logger.info("Database initialized")

    db = SessionLocal()
    try:
        if settings.SEED_ON_STARTUP:
            inserted = seed_default_content(db)
            logger.info("Seed finished: %s", inserted)
        purge_expired_sessions(db)
    finally:
        db.close()

    yield
    logger.info("Shutting down")


def _session_secret() -> str:
    if settings.SESSION_SECRET:
        return settings.SESSION_SECRET
    logger.warning("SESSION_SECRET is not set; using a random secret, sessions end on restart")
    return secrets.token_urlsafe(32)


def create_app() -> FastAPI:
    settings.validate_security()

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
## Qatar Digital Solutions API

Backend for the bilingual (English / Arabic) company website.

### Features:
- **Portfolio, Services, Testimonials**: Public showcase content
- **Blog**: Posts addressed by slug
- **Careers**: Open positions and job applications
- **Contact**: Lead capture from the contact form
- **Analytics**: Daily page view, WhatsApp click and contact counters
- **Admin**: Session-protected management under `/api/admin`
        """,
        version=API_VERSION,
        lifespan=lifespan,
    )

    # Signed cookie carrying the admin session id
    app.add_middleware(
        SessionMiddleware,
        secret_key=_session_secret(),
        session_cookie=settings.SESSION_COOKIE_NAME,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        same_site="lax",
        https_only=settings.is_production,
    )

    # CORS middleware for frontend access; credentials carry the session cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_api_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info("%s %s %s in %.0fms", request.method, request.url.path,
                        response.status_code, elapsed_ms)
        return response

    register_error_handlers(app)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": settings.APP_NAME}

    @app.get("/")
    def root():
        """Root endpoint with API info"""
        return {
            "service": settings.APP_NAME,
            "version": API_VERSION,
            "docs": "/docs",
            "endpoints": {
                "portfolio": "/api/portfolio",
                "services": "/api/services",
                "blog": "/api/blog",
                "careers": "/api/careers",
                "admin": "/api/admin",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("qds.main:app", host="0.0.0.0", port=8000, reload=True)
