import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from applytrack.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    """SQLite gets a single-threaded pool; PostgreSQL gets a sized pool."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# Largest value an integer key or offset may take (signed 64-bit)
MAX_ROW_ID = 2**63 - 1


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Alembic owns the schema ("alembic upgrade head"). Models are imported here
    so they register on Base.metadata; tables are only created directly when
    DB_CREATE_ALL is set (handy for a throwaway SQLite database).
    """
    from applytrack.models import account, job_application, interview_round  # noqa: F401

    if settings.DB_CREATE_ALL:
        logger.info("DB_CREATE_ALL enabled, creating tables")
        Base.metadata.create_all(bind=engine)
