"""Project service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from projectsapp.db import create_engine_from_url, create_session_factory, init_db
from projectsapp.exc import DoesNotExist, StoreError
from projectsapp.services.project_dao import ProjectDao

if TYPE_CHECKING:
    from projectsapp.models.project import Project, ProjectSummary
    from projectsapp.settings import Settings

logger = logging.getLogger(__name__)


class ProjectService:
    """
    Service layer between the console and :class:`ProjectDao`.

    The operations are simple enough that this is mostly a pass-through; it
    exists to turn "no such row" results into errors, and as the place where
    fetching project details (materials, steps, categories) would go.

    Args:
        dao: Data access object for the projects table

    """

    def __init__(self, dao: ProjectDao) -> None:
        #: The data access object.
        self.dao = dao

    @classmethod
    def from_settings(cls, settings: Settings) -> ProjectService:
        """
        Connect to the configured store, create the schema if needed and
        return a service bound to it.

        Args:
            settings: Application settings

        Raises:
            StoreError: the store could not be reached or initialized

        Returns:
            The new :class:`ProjectService`

        """
        url = settings.database_url
        try:
            engine = create_engine_from_url(url)
            init_db(engine)
        except SQLAlchemyError as e:
            msg = f"Could not open database {url}: {e}"
            raise StoreError(msg) from e
        logger.info("Using database %s", engine.url.render_as_string())
        return cls(ProjectDao(create_session_factory(engine)))

    def add_project(self, project: Project) -> Project:
        """
        Insert a new project.

        Args:
            project: The project to add

        Returns:
            The project with its newly assigned ID

        """
        return self.dao.insert(project)

    def list_projects(self) -> list[ProjectSummary]:
        """
        Get every project, without details.
        """
        return self.dao.fetch_all()

    def get_project(self, project_id: int) -> Project:
        """
        Get a project by ID.

        Args:
            project_id: Project ID

        Raises:
            DoesNotExist: no project has that ID

        Returns:
            The project

        """
        project = self.dao.fetch_by_id(project_id)
        if project is None:
            raise DoesNotExist("Project", project_id)  # noqa: EM101
        return project

    def update_project(self, project: Project) -> None:
        """
        Overwrite a project's fields.

        Args:
            project: The project carrying its ID and the new values

        Raises:
            StoreError: no project has that ID

        """
        if not self.dao.update(project):
            msg = f'Project with ID "{project.id}" does not exist.'
            raise StoreError(msg)
