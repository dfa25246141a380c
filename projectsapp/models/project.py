"""Project model."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from sqlalchemy import CheckConstraint, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from projectsapp.db import Base
from projectsapp.utils import to_hours

#: The lowest allowed difficulty.
MIN_DIFFICULTY: Final[int] = 1
#: The highest allowed difficulty.
MAX_DIFFICULTY: Final[int] = 5


@dataclass(frozen=True)
class ProjectSummary:
    """
    A lightweight view of a project row, as shown in project listings.
    """

    #: The project ID.
    id: int
    #: The project name.
    name: str | None

    def __str__(self) -> str:
        return f"{self.id}: {self.name}"


class Project(Base):
    """
    Represents a project.

    A project has these characteristics:
    - A name
    - An estimated and an actual number of hours, each with two decimal places
    - A difficulty from 1 (easy) to 5 (hard)
    - Free-form notes

    The ID is assigned by the database when the project is inserted and never
    changes afterwards.
    """

    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            f"difficulty IS NULL OR difficulty BETWEEN {MIN_DIFFICULTY} "
            f"AND {MAX_DIFFICULTY}",
            name="ck_projects_difficulty",
        ),
    )

    #: The project ID.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    #: The project name.
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    #: The estimated number of hours to finish the project.
    estimated_hours: Mapped[Decimal | None] = mapped_column(
        Numeric(7, 2), nullable=True
    )
    #: The number of hours actually spent on the project.
    actual_hours: Mapped[Decimal | None] = mapped_column(Numeric(7, 2), nullable=True)
    #: The project difficulty, 1 through 5.
    difficulty: Mapped[int | None] = mapped_column(Integer, nullable=True)
    #: Notes about the project.
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    @validates("estimated_hours", "actual_hours")
    def _quantize_hours(self, _key: str, value: Any) -> Decimal | None:
        """
        Store hours with exactly two fractional digits.
        """
        return to_hours(value)

    def copy(self, **changes: Any) -> Project:
        """
        Return a new, unattached project with the same ID and field values,
        with ``changes`` applied on top.

        Keyword Args:
            **changes: Field values to replace

        Returns:
            The new :class:`~projectsapp.models.project.Project` object

        """
        values = self.to_dict()
        values.update(changes)
        return Project(**values)

    def to_dict(self) -> dict[str, Any]:
        """
        Return the project's ID and fields as a dictionary.
        """
        return {
            "id": self.id,
            "name": self.name,
            "estimated_hours": self.estimated_hours,
            "actual_hours": self.actual_hours,
            "difficulty": self.difficulty,
            "notes": self.notes,
        }

    def __str__(self) -> str:
        return (
            f"Project(id={self.id}, name={self.name}, "
            f"estimated_hours={self.estimated_hours}, "
            f"actual_hours={self.actual_hours}, difficulty={self.difficulty}, "
            f"notes={self.notes})"
        )
