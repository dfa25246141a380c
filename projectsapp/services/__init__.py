"""Services package initialization."""

from projectsapp.services.project_dao import ProjectDao
from projectsapp.services.project_service import ProjectService

__all__ = ["ProjectDao", "ProjectService"]
