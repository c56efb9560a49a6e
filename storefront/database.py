"""
Database connection and session management for the Order Store
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Base class for all database models
Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for ``database_url``.

    SQLite connections are shared with the worker threads FastAPI runs
    sync endpoints on, so same-thread checking is turned off for them.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory used by repositories, one session per operation"""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)
