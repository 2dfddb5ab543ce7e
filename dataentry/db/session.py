"""Engine/session helpers for the SQLite store."""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


def create_store_engine(url: str) -> Engine:
    url = (url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to open the store.")
    return create_engine(url, future=True)


def make_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session(factory: sessionmaker) -> Iterator[Session]:
    session: Session = factory()
    try:
        yield session
    finally:
        session.close()
