"""SQLAlchemy model for the single append-only people table."""
from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .session import Base


class Person(Base):
    __tablename__ = "people"

    # Only used to keep fetch order equal to insertion order.
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    age = Column(Integer)
