# core/db.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import DATABASE_URL


def make_engine(url: str):
    # SQLite connections are shared with the polling threads
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, future=True, connect_args=connect_args)


def make_session_factory(bind):
    """Session factory used by every repository. expire_on_commit=False keeps returned rows readable."""
    return sessionmaker(bind=bind, autoflush=False, autocommit=False, expire_on_commit=False, future=True)


engine = make_engine(DATABASE_URL)

SessionLocal = make_session_factory(engine)

Base = declarative_base()
