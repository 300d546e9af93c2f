"""Database Configuration and Connection Management Module

This module handles database connectivity, session management, and table operations
for the interview service. The connection URL comes from the environment:
``DATABASE_URL`` wins, otherwise the ``DB_*`` variables build a PostgreSQL URL,
otherwise a local SQLite file is used.

Dependencies:
- sqlalchemy: For database ORM and connection management.
- dotenv: For environment variable loading.
- loguru: For logging operations.
- app.models.interview_models: For database model definitions.

Author: @kcaparas1630
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from dotenv import load_dotenv
import os
from loguru import logger
from app.models.interview_models import Base
load_dotenv()


def build_database_url() -> str:
    """Resolve the database URL from environment variables."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    # Load database connection details from environment variables
    parts = {
        "DB_USER": os.getenv("DB_USER"),
        "DB_PASSWORD": os.getenv("DB_PASSWORD"),
        "DB_HOST": os.getenv("DB_HOST"),
        "DB_PORT": os.getenv("DB_PORT"),
        "DB_NAME": os.getenv("DB_NAME"),
    }
    if all(parts.values()):
        return (
            f"postgresql+psycopg2://{parts['DB_USER']}:{parts['DB_PASSWORD']}"
            f"@{parts['DB_HOST']}:{parts['DB_PORT']}/{parts['DB_NAME']}?sslmode=require"
        )

    missing_vars = [var for var, value in parts.items() if not value]
    if len(missing_vars) < len(parts):
        raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

    logger.warning("No database configuration found, falling back to local SQLite database")
    return "sqlite:///./interviews.db"


def create_db_engine(url: str):
    """Create a SQLAlchemy engine with settings suited to the backend."""
    if url.startswith("sqlite"):
        return create_engine(url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=False, # Log SQL queries for debugging
        pool_pre_ping=True, # verify connections before using
        pool_recycle=300 # Recycle connections every 5 minutes
    )


DATABASE_URL = build_database_url()

# Create a new SQLAlchemy engine instance
engine = create_db_engine(DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db_session():
    """FastAPI dependency for database session management.

    Creates a new database session for each request and ensures proper
    cleanup after the request is completed.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def create_tables():
    """Create all database tables defined in the models.

    This operation is idempotent - existing tables won't be modified.

    Raises:
        Exception: If table creation fails
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Error creating database table: {e}")
        raise
