"""Persistence gateway for the people table, backed by SQLAlchemy."""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from dataentry.core.errors import InsertError, QueryError, SchemaError, StoreConnectionError
from dataentry.db.models import Person
from dataentry.db.session import Base, create_store_engine, get_session, make_sessionmaker

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class PeopleListing:
    """
    Lazy view over every stored (name, age) pair, oldest first.

    Nothing is read until iteration starts and every new iteration runs a
    fresh query, so the listing can be walked more than once.
    """

    def __init__(self, session_factory) -> None:
        self._session_factory = session_factory

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        try:
            with get_session(self._session_factory) as session:
                stmt = select(Person.name, Person.age).order_by(Person.id)
                for name, age in session.execute(stmt):
                    yield name, age
        except SQLAlchemyError as exc:
            raise QueryError(_driver_message(exc)) from exc


class PeopleRepository:
    """Owns the engine for one store and exposes the three people operations."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = make_sessionmaker(engine)

    @classmethod
    def from_url(cls, url: str) -> "PeopleRepository":
        return cls(create_store_engine(url))

    def ensure_schema(self) -> None:
        try:
            with self.engine.connect():
                pass
        except SQLAlchemyError as exc:
            raise StoreConnectionError(_driver_message(exc)) from exc
        try:
            Base.metadata.create_all(bind=self.engine, tables=[Person.__table__])
        except SQLAlchemyError as exc:
            raise SchemaError(_driver_message(exc)) from exc
        logger.debug("people table ready on %s", self.engine.url)

    def insert_person(self, name: str, age: int) -> None:
        with get_session(self._session_factory) as session:
            try:
                session.add(Person(name=name, age=age))
                session.commit()
            except SQLAlchemyError as exc:
                session.rollback()
                raise InsertError(_driver_message(exc)) from exc

    def fetch_all_people(self) -> PeopleListing:
        return PeopleListing(self._session_factory)

    def close(self) -> None:
        self.engine.dispose()


@contextmanager
def open_people_repository(url: str) -> Iterator[PeopleRepository]:
    repo = PeopleRepository.from_url(url)
    try:
        yield repo
    finally:
        repo.close()
