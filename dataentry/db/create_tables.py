"""Utility script to create the people table and exit."""
from __future__ import annotations

from dataentry.core.config import get_settings
from dataentry.core.errors import StorageError
from dataentry.repositories.people_repository import open_people_repository


def create_all() -> None:
    with open_people_repository(get_settings().database_url) as repo:
        repo.ensure_schema()


if __name__ == "__main__":
    try:
        create_all()
        print("Database tables created successfully.")
    except StorageError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
