"""Shared pytest fixtures for Projects Manager tests."""

import os
import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

from projectsapp.db import create_engine_from_url, create_session_factory, init_db
from projectsapp.models.project import Project
from projectsapp.services.project_dao import ProjectDao
from projectsapp.services.project_service import ProjectService


@pytest.fixture
def db_engine():
    """Create a temporary SQLite database with the schema in place."""
    temp_db = tempfile.NamedTemporaryFile(mode="w", delete=False, suffix=".db")
    temp_db.close()
    db_path = Path(temp_db.name)

    engine = create_engine_from_url(f"sqlite:///{db_path}")
    init_db(engine)

    yield engine

    engine.dispose()
    os.unlink(temp_db.name)


@pytest.fixture
def session_factory(db_engine):
    """Create a session factory bound to the temporary database."""
    return create_session_factory(db_engine)


@pytest.fixture
def dao(session_factory):
    """Create a ProjectDao on the temporary database."""
    return ProjectDao(session_factory)


@pytest.fixture
def service(dao):
    """Create a ProjectService on the temporary database."""
    return ProjectService(dao)


@pytest.fixture
def make_project(dao):
    """
    Return a helper that inserts a project with defaults.

    Keyword arguments override the default field values.
    """

    def _make_project(**fields):
        values = {
            "name": "Build shed",
            "estimated_hours": Decimal("10.00"),
            "actual_hours": Decimal("0.00"),
            "difficulty": 3,
            "notes": "phase 1",
        }
        values.update(fields)
        return dao.insert(Project(**values))

    return _make_project


@pytest.fixture
def console_input(monkeypatch):
    """
    Return a helper that feeds lines to ``input()``.

    The prompts passed to ``input()`` are collected in the returned list.
    """
    prompts = []

    def _feed(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return _feed
