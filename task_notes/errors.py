"""Errors raised by the task store."""


class TaskNotesError(Exception):
    """Base class for task store errors."""

    message = "Task store error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidTaskError(TaskNotesError):
    """A create request is missing its title or content."""

    message = "Title and content are required"


class TaskNotFoundError(TaskNotesError):
    """No live task has the requested id."""

    message = "Task not found"

    def __init__(self, task_id: str) -> None:
        super().__init__()
        self.task_id = task_id
