"""Data models for Projects Manager."""

from projectsapp.models.project import Project, ProjectSummary

__all__ = ["Project", "ProjectSummary"]
