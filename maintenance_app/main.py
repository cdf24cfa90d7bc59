import logging
from pathlib import Path

from fastapi import FastAPI, APIRouter, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from contextlib import asynccontextmanager

from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from maintenance_app.core.config import Settings, settings
from .routers import maintenance, info
from .core import scheduler
from .core.limiter import limiter
from .core.maintenance_state import maintenance_run
from .middleware.errors import unhandled_error_middleware

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Maintenance server running on port {settings.API_PORT}")
    logger.info(f"Maintenance started at: {maintenance_run.start_time.isoformat()}")
    logger.info(f"Estimated completion: {maintenance_run.estimated_completion.isoformat()}")
    scheduler.init_scheduler()
    scheduler.start_scheduler()
    yield
    scheduler.shutdown_scheduler()


async def security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Permissions-Policy"] = "geolocation=(), microphone=(), camera=()"
    return response


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Too many requests"}
    )


def add_client_routes(app: FastAPI, app_settings: Settings):
    """Serve the built client bundle; unknown paths get index.html so deep links load the page"""
    static_dir = Path(app_settings.STATIC_DIR).resolve()
    index_file = static_dir / "index.html"
    api_prefix = app_settings.API_PREFIX.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    def serve_client(full_path: str):
        if api_prefix and (full_path == api_prefix or full_path.startswith(f"{api_prefix}/")):
            raise HTTPException(status_code=404, detail="Not Found")

        candidate = (static_dir / full_path).resolve()
        if candidate.is_file() and static_dir in candidate.parents:
            return FileResponse(candidate)
        return FileResponse(index_file)


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        lifespan=lifespan,
        title=app_settings.PROJECT_NAME,
        version=app_settings.VERSION,
        docs_url=None,
        redoc_url=None
    )

    #rate limiting
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    #errors escaping a handler => generic 500, inside the security headers
    app.middleware("http")(unhandled_error_middleware)

    #security headers
    app.middleware("http")(security_headers)

    #CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.BACKEND_CORS_ORIGINS,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
    )

    api_router = APIRouter(prefix=app_settings.API_PREFIX)

    api_router.include_router(maintenance.router)
    api_router.include_router(info.router)

    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    def health_check():
        return {
            "status": "healthy",
            "project_name": app_settings.PROJECT_NAME,
            "version": app_settings.VERSION,
        }

    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    #registered last so API routes match first
    if app_settings.is_production and app_settings.STATIC_DIR and app_settings.STATIC_DIR.is_dir():
        add_client_routes(app, app_settings)

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.API_PORT)
