# chatrelay/infra/postgres.py

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from chatrelay.core.config import get_settings
from chatrelay.models.base import Base

logger = logging.getLogger(__name__)

# =========================
# ENGINE CONFIGURATION
# =========================


def build_engine(database_url: str, echo: bool = False):
    """Create an engine; pool tuning only applies to server databases."""
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            echo=echo,
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Check connections before using them
        pool_size=5,
        max_overflow=10,
        pool_recycle=3600,   # Recycle connections every hour
        echo=echo,
    )


engine = build_engine(get_settings().database_url)

# =========================
# SESSION CONFIGURATION
# =========================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# =========================
# DATABASE FUNCTIONS
# =========================


def get_db():
    """
    FastAPI dependency to provide a DB session to routes.
    Usage:
        def my_route(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Create the users and chats tables if they do not exist."""
    # Importing the models registers them on Base.metadata
    from chatrelay.models.chat import Chat  # noqa: F401
    from chatrelay.models.user import User  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready: %s", sorted(Base.metadata.tables))


def test_connection(bind=None) -> bool:
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return False
