"""
Database Connection & Session Management
-----------------------------------------
Sets up SQLAlchemy engine, session, and base class for all models.

EXPLANATION FOR BEGINNERS:
- Engine = the "connection pool" to the database
- SessionLocal = a "conversation" with the database
- Base = parent class for all database tables
- get_db() = FastAPI dependency that gives each request its own session

IMPORTANT CONCEPTS:
1. Sessions are like transactions - they track changes until commit()
2. Every request gets a fresh session, closed when the request ends
3. Base.metadata contains info about all your tables
"""

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator
import logging

from calendify.config import settings

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE
# =============================================================================
# pool_pre_ping=True checks if connection is alive before using it
# SQLite (local dev) can't take the pool sizing options and must allow
# connections to cross threads, since FastAPI runs sync routes in a threadpool

if settings.is_sqlite:
    engine = create_engine(
        settings.DATABASE_URL,
        echo=settings.DB_ECHO,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Check connections before using
        echo=settings.DB_ECHO,
        pool_size=5,  # Number of connections to keep open
        max_overflow=10,  # Additional connections if pool is full
    )

# =============================================================================
# SESSION FACTORY
# =============================================================================
# autocommit=False: Changes aren't saved until you call commit()
# autoflush=False: Changes aren't sent to DB until you flush/commit

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# =============================================================================
# BASE CLASS FOR MODELS
# =============================================================================
Base = declarative_base()


# =============================================================================
# DEPENDENCY FOR FASTAPI ROUTES
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session.

    HOW THIS WORKS:
    1. Creates a new session
    2. Yields it to the route
    3. Automatically closes it when done (even if there's an error)

    USAGE IN ROUTES:
    @router.get("/events")
    def list_events(db: Session = Depends(get_db)):
        return db.query(Event).all()
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================
def init_db():
    """
    Create all tables in the database.

    PRODUCTION NOTE:
    In production, use Alembic migrations instead of this.
    """
    # Models must be imported so they register on Base.metadata
    from calendify.db import models  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


# =============================================================================
# DATABASE HEALTH CHECK
# =============================================================================
def check_db_connection() -> bool:
    """
    Test if database connection is working.

    RETURNS:
    True if connection successful, False otherwise
    """
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
    finally:
        db.close()


if __name__ == "__main__":
    print("Testing database connection...")
    if check_db_connection():
        print("Connected to database!")
        init_db()
    else:
        print("Failed to connect to database")
