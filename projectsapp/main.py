"""Main entry point for Projects Manager."""

import logging
import sys

from projectsapp.exc import StoreError
from projectsapp.services.project_service import ProjectService
from projectsapp.settings import Settings
from projectsapp.ui.console import ProjectsApp

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """
    Send log records to stderr at ``level``.

    Unknown level names fall back to ``WARNING``.
    """
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """
    Run the Projects Manager console application.
    """
    settings = Settings()
    configure_logging(settings.log_level)

    try:
        service = ProjectService.from_settings(settings)
    except StoreError as e:
        logger.exception("Could not open the projects database")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    ProjectsApp(service).run()


if __name__ == "__main__":
    main()
