# health_care/database.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi import Request

Base = declarative_base()

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")

def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Builds the engine for the configured DATABASE_URL."""
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI's worker threads
        connect_args = {"check_same_thread": False}
        if database_url in IN_MEMORY_SQLITE_URLS:
            # A single connection keeps the in-memory database alive
            return create_engine(database_url, echo=echo, connect_args=connect_args, poolclass=StaticPool)
        return create_engine(database_url, echo=echo, connect_args=connect_args)
    return create_engine(database_url, echo=echo, pool_pre_ping=True)

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db(request: Request):
    """Dependency to get a DB session for a request."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
