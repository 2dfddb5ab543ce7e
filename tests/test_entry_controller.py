from __future__ import annotations

import sys
import threading
from pathlib import Path

# Make the dataentry package importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402

from dataentry.core.errors import InputError, InsertError, QueryError  # noqa: E402
from dataentry.repositories.people_repository import open_people_repository  # noqa: E402
from dataentry.services.entry_controller import EntryController, Outcome  # noqa: E402
from dataentry.services.form_state import FormState  # noqa: E402


@pytest.fixture()
def db_url(tmp_path):
    return f"sqlite:///{tmp_path / 'data.db'}"


@pytest.fixture()
def controller(db_url):
    with open_people_repository(db_url) as repository:
        ctl = EntryController(repository)
        assert ctl.startup().outcome is Outcome.OK
        yield ctl


def _save(ctl: EntryController, name: str, age: str):
    return ctl.save(name=name, age=age)


def test_save_then_view_shows_entry(controller):
    result = _save(controller, "Alice", "30")
    assert result.outcome is Outcome.SUCCESS
    assert (result.title, result.message) == ("Success", "Data saved successfully.")
    assert controller.form.read_name() == ""
    assert controller.form.read_age() == ""

    view = controller.view()
    assert view.ok and not view.notify
    assert "Alice, 30" in view.display.splitlines()


def test_non_integer_age_leaves_store_and_form_untouched(controller):
    result = _save(controller, "Alice", "abc")
    assert result.outcome is Outcome.INPUT_ERROR
    assert isinstance(result.error, InputError)
    assert (result.title, result.message) == ("Input Error", "Please enter a valid age (integer).")
    assert controller.form.read_name() == "Alice"
    assert controller.form.read_age() == "abc"
    assert list(controller.repository.fetch_all_people()) == []


def test_clear_always_empties_fields(controller):
    controller.form.update(name="Someone", age="not a number")
    result = controller.clear()
    assert result.ok and not result.notify
    assert controller.form.read_name() == ""
    assert controller.form.read_age() == ""


def test_view_of_empty_store_is_empty_without_notice(controller):
    result = controller.view()
    assert result.outcome is Outcome.OK
    assert result.display == ""
    assert not result.notify


def test_alice_and_bob(controller):
    _save(controller, "Alice", "30")
    _save(controller, "Bob", "25")
    lines = controller.view().display.splitlines()
    assert sorted(lines) == ["Alice, 30", "Bob, 25"]
    assert lines == ["Alice, 30", "Bob, 25"]


def test_entries_persist_across_sessions(db_url):
    with open_people_repository(db_url) as repository:
        ctl = EntryController(repository, FormState())
        ctl.startup()
        _save(ctl, "Alice", "30")

    with open_people_repository(db_url) as repository:
        ctl = EntryController(repository)
        ctl.startup()
        assert ctl.view().display == "Alice, 30\n"


def test_view_failure_keeps_prior_display(controller, monkeypatch):
    def boom():
        raise QueryError("disk I/O error")

    monkeypatch.setattr(controller.repository, "fetch_all_people", boom)
    result = controller.view()
    assert result.outcome is Outcome.STORAGE_ERROR
    assert result.display is None
    assert (result.title, result.message) == ("Database Error", "Error retrieving data: disk I/O error")


def test_save_failure_reports_database_error_and_keeps_form(controller, monkeypatch):
    def boom(name, age):
        raise InsertError("database is locked")

    monkeypatch.setattr(controller.repository, "insert_person", boom)
    result = _save(controller, "Alice", "30")
    assert result.outcome is Outcome.STORAGE_ERROR
    assert result.message == "Error saving data: database is locked"
    assert controller.form.read_name() == "Alice"


def test_startup_failure_is_reported_not_fatal(tmp_path):
    url = f"sqlite:///{tmp_path / 'missing' / 'data.db'}"
    with open_people_repository(url) as repository:
        ctl = EntryController(repository)
        result = ctl.startup()
        assert result.outcome is Outcome.STORAGE_ERROR
        assert result.title == "Database Error"
        assert result.message.startswith("Error connecting to database: ")

        # The controller stays usable; store actions keep failing.
        assert _save(ctl, "Alice", "30").outcome is Outcome.STORAGE_ERROR
        assert ctl.view().outcome is Outcome.STORAGE_ERROR
        assert ctl.clear().ok


def test_submitted_values_are_applied_together_with_the_save(controller):
    # Another request filled the shared form just before this save ran.
    controller.form.update(name="Bob", age="x")
    result = controller.save(name="Alice", age="30")
    assert result.outcome is Outcome.SUCCESS
    assert list(controller.repository.fetch_all_people()) == [("Alice", 30)]


def test_submitted_values_wait_for_the_running_action(controller):
    results = []
    with controller._lock:
        worker = threading.Thread(target=lambda: results.append(controller.save(name="Alice", age="30")))
        worker.start()
        worker.join(timeout=0.2)
        assert worker.is_alive()
        assert controller.form.read_name() == ""
        controller.form.update(name="Bob", age="x")
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert results[0].outcome is Outcome.SUCCESS
    assert list(controller.repository.fetch_all_people()) == [("Alice", 30)]


def test_view_applies_submitted_values(controller):
    controller.view(name="Carol", age="4")
    assert controller.form.read_name() == "Carol"
    assert controller.form.read_age() == "4"


def test_table_creation_failure_is_reported(db_url):
    with open_people_repository(db_url) as repository:
        with repository.engine.begin() as conn:
            conn.execute(text("CREATE TABLE other (x INTEGER)"))
            conn.execute(text("CREATE INDEX people ON other (x)"))
        ctl = EntryController(repository)
        result = ctl.startup()
    assert result.outcome is Outcome.STORAGE_ERROR
    assert result.title == "Database Error"
    assert result.message.startswith("Error creating table: ")
