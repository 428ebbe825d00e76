from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.pool import StaticPool
from typing import Generator
import os
from dotenv import load_dotenv
import logging
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


# Load environment variables
load_dotenv()

ENV = os.environ.get("ENV", "local")


def _sqlite_connect_args(url: str) -> dict:
    # Sessions are used from the server's worker threads
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


if ENV == "test":
    # One shared connection so every thread sees the same in-memory tables
    DATABASE_URL = "sqlite://"
    engine = create_engine(
        DATABASE_URL,
        connect_args=_sqlite_connect_args(DATABASE_URL),
        poolclass=StaticPool,
    )

elif ENV == "local":
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./showtracker.db")
    logger.info(f"Connecting to local database at: {DATABASE_URL}")
    engine = create_engine(
        DATABASE_URL,
        echo=os.environ.get("DATABASE_ECHO", "").lower() in ("1", "true", "yes"),
        connect_args=_sqlite_connect_args(DATABASE_URL),
    )

elif ENV == "prod":
    DATABASE_URL = os.environ.get("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL must be set when ENV=prod")
    engine = create_engine(DATABASE_URL, connect_args=_sqlite_connect_args(DATABASE_URL))
    logger.info("Connected to production database")

else:
    raise ValueError(f"Invalid environment: {ENV}")


def get_session() -> Generator[Session, None, None]:
    """
    Get a database session.
    """
    logger.debug("Establishing database session")
    with Session(engine) as session:
        yield session


def init_db():
    """Create the user and show tables that are missing."""
    try:
        SQLModel.metadata.create_all(engine)
    except SQLAlchemyError as e:
        logger.error(f"Could not create show tracker tables: {str(e)}")
        raise


def drop_all_tables():
    """Drop the user and show tables."""
    logger.info(f"Dropping show tracker tables from {DATABASE_URL}")
    try:
        SQLModel.metadata.drop_all(engine)
    except SQLAlchemyError as e:
        logger.error(f"Could not drop show tracker tables: {str(e)}")
        raise


def recreate_tables():
    """Start from empty user and show tables, as the seeder's --reset does."""
    drop_all_tables()
    init_db()
    logger.info("Show tracker tables recreated")
