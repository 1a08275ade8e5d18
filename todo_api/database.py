import logging
from contextlib import contextmanager
from datetime import datetime, timedelta

from sqlmodel import Session, SQLModel, create_engine, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task

logger = logging.getLogger(__name__)


def make_engine(url: str = DATABASE_URL, **kwargs):
    if url.startswith("sqlite"):
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        return create_engine(url, echo=False, connect_args=connect_args, **kwargs)

    # Postgres and friends: no pooling between requests, pre-ping on checkout
    kwargs.setdefault("poolclass", NullPool)
    return create_engine(url, echo=False, pool_pre_ping=True, **kwargs)


def make_sessionmaker(bind):
    return sessionmaker(class_=Session, autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = make_engine()

SessionLocal = make_sessionmaker(engine)


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Get a database session (context manager style).

    This is a convenience function for use outside of FastAPI dependencies.
    Usage:
        with get_session() as session:
            # do something with session
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind=None):
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=bind or engine)


def seed_tasks(session: Session, now: datetime) -> int:
    """Insert the demo task list into an empty table.

    Returns the number of tasks inserted (0 when the table already has rows).
    """
    if session.exec(select(Task.id).limit(1)).first() is not None:
        return 0

    samples = [
        ("Explore UI/UX", 5),
        ("Review front-end design", 4),
        ("Review back-end design", 3),
        ("Prepare job offer", 2),
    ]
    tasks = [
        Task(
            title=title,
            is_completed=False,
            created_at=now - timedelta(minutes=minutes_ago),
            updated_at=now - timedelta(minutes=minutes_ago),
        )
        for title, minutes_ago in samples
    ]
    tasks.append(
        Task(
            title="Start task management application",
            is_completed=True,
            created_at=now - timedelta(minutes=1),
            updated_at=now - timedelta(minutes=1),
            completed_at=now,
        )
    )

    session.add_all(tasks)
    session.commit()
    logger.info("Seeded %d sample tasks", len(tasks))
    return len(tasks)
