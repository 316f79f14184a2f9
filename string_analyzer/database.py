from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
import logging

from string_analyzer.config import DATABASE_URL

logger = logging.getLogger(__name__)

# ------------------------------------------------------------------------------
# DATABASE ENGINE & SESSION
# ------------------------------------------------------------------------------

def make_engine(url: str):
    """Build an engine suited to the backend named in the URL."""
    if url.startswith("sqlite"):
        # The request handlers run in a threadpool, sessions cross threads
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,   # drop dead connections before use
        pool_recycle=280,     # helps with idle connection timeouts
    )


try:
    engine = make_engine(DATABASE_URL)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base = declarative_base()
except Exception as e:
    logger.error(f"Failed to create SQLAlchemy engine: {e}")
    raise


# ------------------------------------------------------------------------------
# DB DEPENDENCY
# ------------------------------------------------------------------------------
def get_db():
    """Dependency to provide a DB session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db(bind=None):
    """Create the database tables (runs once on startup)."""
    from string_analyzer import models  # noqa: F401  ensure models are registered
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created successfully.")
