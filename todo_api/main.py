import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL, SEED_DATABASE
from .database import create_tables, get_session, seed_tasks
from .error_handlers import register_exception_handlers
from .logging_setup import setup_logging
from .routers import tasks
from .services.tasks import utcnow

setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="ToDo or Not ToDo API",
    description="Minimal task management API",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


# Create tables (and demo data) on startup
@app.on_event("startup")
def on_startup():
    create_tables()
    if SEED_DATABASE:
        with get_session() as session:
            seed_tasks(session, utcnow())
    logger.info("Task API ready")


@app.get("/")
def read_root():
    return {"message": "ToDo or Not ToDo API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
