"""Menu-driven console front end for Projects Manager."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from projectsapp.exc import DoesNotExist, StoreError, ValidationError
from projectsapp.models.project import Project
from projectsapp.ui.prompts import (
    get_decimal_input,
    get_difficulty_input,
    get_int_input,
    get_string_input,
)

if TYPE_CHECKING:
    from projectsapp.services.project_service import ProjectService

logger = logging.getLogger(__name__)


class ProjectsApp:
    """
    Reads menu selections from the console and performs the matching project
    operation until the user enters a blank selection.

    The currently selected project lives in :meth:`run` and is handed to and
    returned from the action methods that need it.

    Args:
        service: The project service

    """

    #: Menu selection: add a project.
    ADD: Final[int] = 1
    #: Menu selection: list projects.
    LIST: Final[int] = 2
    #: Menu selection: select a project.
    SELECT: Final[int] = 3
    #: Menu selection: update the selected project.
    UPDATE: Final[int] = 4

    #: The menu lines, in selection order.
    OPERATIONS: Final[tuple[str, ...]] = (
        "1) Add a project",
        "2) List projects",
        "3) Select a project",
        "4) Update project details",
    )

    def __init__(self, service: ProjectService) -> None:
        #: The project service.
        self.service = service

    def run(self) -> None:
        """
        Print the menu, read a selection and perform it, over and over.

        No error raised by an operation ends the loop: it is reported and the
        menu is shown again.  Blank input at the menu prompt, end of input or
        Ctrl-C ends it.
        """
        current_project: Project | None = None
        while True:
            try:
                self.print_operations(current_project)
                selection = get_int_input("Enter a menu selection")
                if selection is None:
                    self.exit_menu()
                    return
                if selection == self.ADD:
                    self.create_project()
                elif selection == self.LIST:
                    self.list_projects()
                elif selection == self.SELECT:
                    # Unselect first, so a failed selection never leaves the
                    # old project selected
                    current_project = None
                    current_project = self.service.get_project(self.get_project_id())
                elif selection == self.UPDATE:
                    current_project = self.update_project_details(current_project)
                else:
                    print(f"\n{selection} is not a valid selection. Try again.")
            except (EOFError, KeyboardInterrupt):
                print()
                self.exit_menu()
                return
            except ValidationError as e:
                print(f"\nInvalid input: {e} Try again.")
            except DoesNotExist as e:
                print(f"\nNot found: {e}. Try again.")
            except StoreError as e:
                print(f"\nDatabase error: {e} Try again.")
            except Exception as e:
                logger.exception("Unexpected error in menu operation")
                print(f"\nUnexpected error: {e} Try again.")

    def print_operations(self, current_project: Project | None) -> None:
        """
        Print the menu selections, one per line, and the current project.
        """
        print("\nThese are the available selections. Press the Enter key to quit:")
        for line in self.OPERATIONS:
            print(f"  {line}")
        if current_project is None:
            print("\nYou are not working with a project.")
        else:
            print(f"\nYou are working with project: {current_project}")

    def exit_menu(self) -> None:
        print("Exiting the menu.")

    def create_project(self) -> Project:
        """
        Read the fields of a new project from the console and insert it.

        Every field is read before anything is stored, so bad input stores
        nothing.

        Returns:
            The inserted project

        """
        name = get_string_input("Enter the project name")
        estimated_hours = get_decimal_input("Enter the estimated hours")
        actual_hours = get_decimal_input("Enter the actual hours")
        difficulty = get_difficulty_input("Enter the project difficulty (1-5)")
        notes = get_string_input("Enter the project notes")

        project = Project(
            name=name,
            estimated_hours=estimated_hours,
            actual_hours=actual_hours,
            difficulty=difficulty,
            notes=notes,
        )
        project = self.service.add_project(project)
        print(f"You have successfully created project: {project}")
        return project

    def list_projects(self) -> None:
        """
        Print the ID and name of every project.
        """
        projects = self.service.list_projects()
        print("\nProjects:")
        if not projects:
            print("   No projects found.")
        for project in projects:
            print(f"   {project}")

    def get_project_id(self) -> int:
        """
        List the projects and read the ID of the one to select.

        Raises:
            ValidationError: the input is blank or not a number

        """
        self.list_projects()
        project_id = get_int_input("Enter a project ID to select a project")
        if project_id is None:
            msg = "A project ID is required."
            raise ValidationError("", msg)
        return project_id

    def update_project_details(self, current_project: Project | None) -> Project | None:
        """
        Read new values for the current project and store them.

        Blank input for a field keeps its current value.  The project is
        fetched again afterwards so the menu shows what was stored.

        Args:
            current_project: The selected project, or None

        Returns:
            The updated project, or None if no project is selected

        """
        if current_project is None:
            print("\nPlease select a project.")
            return None

        print("\nUpdate Project Details:")
        print("Current Project Details:")
        print(f"Project Name: {current_project.name}")
        print(f"Estimated Hours: {current_project.estimated_hours}")
        print(f"Actual Hours: {current_project.actual_hours}")
        print(f"Difficulty: {current_project.difficulty}")
        print(f"Notes: {current_project.notes}")
        print()

        name = get_string_input("Enter new Project Name or press Enter to keep current")
        estimated_hours = get_decimal_input(
            "Enter new Estimated Hours or press Enter to keep current"
        )
        actual_hours = get_decimal_input(
            "Enter new Actual Hours or press Enter to keep current"
        )
        difficulty = get_difficulty_input(
            "Enter new Difficulty (1-5) or press Enter to keep current"
        )
        notes = get_string_input("Enter new Notes or press Enter to keep current")

        updated = current_project.copy()
        if name is not None:
            updated.name = name
        if estimated_hours is not None:
            updated.estimated_hours = estimated_hours
        if actual_hours is not None:
            updated.actual_hours = actual_hours
        if difficulty is not None:
            updated.difficulty = difficulty
        if notes is not None:
            updated.notes = notes

        self.service.update_project(updated)
        print("\nProject details updated successfully.")
        return self.service.get_project(current_project.id)
