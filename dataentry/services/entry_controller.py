"""
Save / View Data / Clear use cases.

Each action returns an ActionResult describing what the presentation layer
should show; no action opens dialogs or touches widgets itself.
"""

from __future__ import annotations

import enum
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from dataentry.core.errors import (
    DataEntryError,
    InputError,
    SchemaError,
    StorageError,
    StoreConnectionError,
)
from dataentry.domain.people import Person, format_listing, parse_age
from dataentry.repositories.people_repository import PeopleRepository
from dataentry.services.form_state import FormState

logger = logging.getLogger(__name__)

SUCCESS_TITLE = "Success"
SAVED_MESSAGE = "Data saved successfully."
INPUT_ERROR_TITLE = "Input Error"
INVALID_AGE_MESSAGE = "Please enter a valid age (integer)."
DATABASE_ERROR_TITLE = "Database Error"


class Outcome(str, enum.Enum):
    OK = "ok"
    SUCCESS = "success"
    INPUT_ERROR = "input_error"
    STORAGE_ERROR = "storage_error"


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of one user action.

    title/message are set when the user should be notified. display is the new
    content of the read-only listing, or None to keep whatever is shown.
    """

    outcome: Outcome
    title: Optional[str] = None
    message: Optional[str] = None
    display: Optional[str] = None
    error: Optional[DataEntryError] = None

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.OK, Outcome.SUCCESS)

    @property
    def notify(self) -> bool:
        return self.title is not None


def _storage_failure(prefix: str, exc: StorageError) -> ActionResult:
    return ActionResult(
        outcome=Outcome.STORAGE_ERROR,
        title=DATABASE_ERROR_TITLE,
        message=f"{prefix}: {exc.message}",
        error=exc,
    )


class EntryController:
    """Wires the three form actions to the form state and the repository."""

    def __init__(self, repository: PeopleRepository, form: FormState | None = None) -> None:
        self.repository = repository
        self.form = form if form is not None else FormState()
        self._lock = threading.Lock()

    def startup(self) -> ActionResult:
        with self._lock:
            try:
                self.repository.ensure_schema()
            except StoreConnectionError as exc:
                logger.exception("Could not open the store")
                return _storage_failure("Error connecting to database", exc)
            except SchemaError as exc:
                logger.exception("Could not create the people table")
                return _storage_failure("Error creating table", exc)
            return ActionResult(outcome=Outcome.OK)

    def save(self, name: str | None = None, age: str | None = None) -> ActionResult:
        """Apply the submitted field values, if any, and store the entry."""
        with self._lock:
            self.form.update(name=name, age=age)
            name = self.form.read_name()
            try:
                person = Person(name=name, age=parse_age(self.form.read_age()))
            except InputError as exc:
                logger.warning("Rejected save: %s", exc)
                return ActionResult(
                    outcome=Outcome.INPUT_ERROR,
                    title=INPUT_ERROR_TITLE,
                    message=INVALID_AGE_MESSAGE,
                    error=exc,
                )
            try:
                self.repository.insert_person(person.name, person.age)
            except StorageError as exc:
                logger.exception("Error saving data")
                return _storage_failure("Error saving data", exc)
            self.form.clear()
            logger.info("Saved entry for %r", person.name)
            return ActionResult(outcome=Outcome.SUCCESS, title=SUCCESS_TITLE, message=SAVED_MESSAGE)

    def view(self, name: str | None = None, age: str | None = None) -> ActionResult:
        with self._lock:
            self.form.update(name=name, age=age)
            try:
                display = format_listing(self.repository.fetch_all_people())
            except StorageError as exc:
                logger.exception("Error retrieving data")
                return _storage_failure("Error retrieving data", exc)
            return ActionResult(outcome=Outcome.OK, display=display)

    def clear(self) -> ActionResult:
        with self._lock:
            self.form.clear()
            return ActionResult(outcome=Outcome.OK)
