class ProjectsError(Exception):
    """Base class for all Projects Manager errors."""


class ValidationError(ProjectsError):
    """Exception raised when user input cannot be converted to a field value."""

    def __init__(self, value: str, message: str):
        self.value = value
        super().__init__(message)


class DoesNotExist(ProjectsError):  # noqa: N818
    """Exception raised when a resource does not exist."""

    def __init__(self, resource_type: str, resource_id: int | str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f'{resource_type} with ID "{resource_id!s}" does not exist')


class StoreError(ProjectsError):
    """Exception raised when a statement against the store fails."""
