"""Data access for the ``projects`` table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from projectsapp.db import session_scope
from projectsapp.exc import StoreError
from projectsapp.models.project import Project, ProjectSummary

if TYPE_CHECKING:
    from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

#: The projects table, for Core statements.
projects_table = Project.__table__


class ProjectDao:
    """
    Translates project operations into SQL statements.

    Each method runs in its own session, committed on success and rolled back
    on failure.  Absence is reported as ``None`` or ``False``; a statement that
    cannot execute raises :class:`~projectsapp.exc.StoreError`.

    Args:
        session_factory: Factory producing sessions bound to the store

    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        #: The session factory.
        self.session_factory = session_factory

    @staticmethod
    def _values(project: Project) -> dict[str, Any]:
        """
        Get the mutable column values of ``project``.
        """
        values = project.to_dict()
        del values["id"]
        return values

    def insert(self, project: Project) -> Project:
        """
        Insert a project row.

        Args:
            project: Project to insert; its ``id`` is ignored

        Raises:
            StoreError: the row could not be inserted

        Returns:
            ``project``, with :attr:`~projectsapp.models.project.Project.id`
            set to the newly assigned ID

        """
        stmt = insert(projects_table).values(**self._values(project))
        try:
            with session_scope(self.session_factory) as session:
                result = session.execute(stmt)
                project_id = result.inserted_primary_key[0]
        except IntegrityError as e:
            logger.warning("Rejected project %r: %s", project.name, e.orig)
            msg = f"Could not insert project: {e}"
            raise StoreError(msg) from e
        except SQLAlchemyError as e:
            logger.exception("Failed to insert project %r", project.name)
            msg = f"Could not insert project: {e}"
            raise StoreError(msg) from e
        project.id = project_id
        logger.debug("Inserted project %d", project_id)
        return project

    def fetch_all(self) -> list[ProjectSummary]:
        """
        Get the ID and name of every project, in ID order.

        Raises:
            StoreError: the query failed

        Returns:
            List of project summaries; empty when there are no projects

        """
        stmt = select(projects_table.c.id, projects_table.c.name).order_by(
            projects_table.c.id
        )
        try:
            with session_scope(self.session_factory) as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.exception("Failed to list projects")
            msg = f"Could not list projects: {e}"
            raise StoreError(msg) from e
        return [ProjectSummary(id=row.id, name=row.name) for row in rows]

    def fetch_by_id(self, project_id: int) -> Project | None:
        """
        Get a project by ID.

        Args:
            project_id: Project ID

        Raises:
            StoreError: the query failed

        Returns:
            Project or None if not found

        """
        try:
            with session_scope(self.session_factory) as session:
                project = session.get(Project, project_id)
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch project %s", project_id)
            msg = f"Could not fetch project {project_id}: {e}"
            raise StoreError(msg) from e
        logger.debug("Fetched project %s: %s", project_id, project is not None)
        return project

    def update(self, project: Project) -> bool:
        """
        Overwrite every mutable column of the row with ``project``'s ID.

        Args:
            project: Project carrying the ID to update and the new values

        Raises:
            StoreError: the statement failed

        Returns:
            ``True`` if exactly one row was updated, ``False`` if no row has
            that ID

        """
        if project.id is None:
            return False
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == project.id)
            .values(**self._values(project))
        )
        try:
            with session_scope(self.session_factory) as session:
                rowcount = session.execute(stmt).rowcount
        except IntegrityError as e:
            logger.warning("Rejected update of project %s: %s", project.id, e.orig)
            msg = f"Could not update project {project.id}: {e}"
            raise StoreError(msg) from e
        except SQLAlchemyError as e:
            logger.exception("Failed to update project %s", project.id)
            msg = f"Could not update project {project.id}: {e}"
            raise StoreError(msg) from e
        logger.debug("Updated project %s: %d row(s)", project.id, rowcount)
        return rowcount == 1
