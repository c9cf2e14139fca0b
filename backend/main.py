from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config.settings import settings
from init_db import init_database
from api import auth, email_categories, email_contents, forms, form_submissions, app_forms, health
from utils.logging_utils import RequestContextFilter, set_logging_context, clear_logging_context
from utils.uuid_helper import generate_uuid
import logging
from logging.handlers import RotatingFileHandler
import sys


def configure_logging():
    """Rotating file log plus console output, both tagged with the request id"""
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_file = settings.log_dir / "cms-api.log"

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s')
    context_filter = RequestContextFilter()

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.addFilter(context_filter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.addFilter(context_filter)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    return log_file


log_file = configure_logging()
logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup"""
    logger.info(f"Starting {settings.app_name} ({settings.environment})")
    init_database()
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=settings.app_name,
    description="Content management API: auth, email categories and contents, dynamic forms",
    version="1.0.0",
    lifespan=lifespan
)

# Production only accepts the configured frontends; development allows all origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=settings.is_production,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line written while handling a request with its id"""
    request_id = request.headers.get("X-Request-ID") or generate_uuid()
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response
    finally:
        clear_logging_context()


# Include API routers (submission routes before forms so /forms/submissions/... is not read as a form id)
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(email_categories.router)
app.include_router(email_contents.router)
app.include_router(form_submissions.router)
app.include_router(forms.router)
app.include_router(app_forms.router)


@app.get("/")
def root():
    """Root endpoint - API only mode"""
    return {
        "message": settings.app_name,
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {settings.app_name} on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
