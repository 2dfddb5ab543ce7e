"""Database helpers (engine/session export)."""

from .session import Base, create_store_engine, get_session, make_sessionmaker

__all__ = ["Base", "create_store_engine", "get_session", "make_sessionmaker"]
