"""SQLAlchemy engine and session setup."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from recruit_assistant.config import normalize_database_url


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str) -> Engine:
    url = normalize_database_url(url)
    if url.startswith("sqlite:///") and not url.startswith("sqlite:///:memory:"):
        # sqlite will not create missing parent directories
        Path(url.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, pool_pre_ping=True, echo=False)


def create_session_factory(url: str, create_tables: bool = True) -> sessionmaker:
    engine = create_db_engine(url)
    if create_tables:
        Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
