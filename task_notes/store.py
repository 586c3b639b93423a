"""In-memory task storage.

Tasks live only as long as the process. All access goes through a single
``TaskStore`` instance that guards its collection with a lock, so the API
can serve requests from FastAPI's worker threads safely.
"""

import logging
import threading
from collections.abc import Callable
from datetime import UTC, datetime
from uuid import uuid4

from task_notes.errors import InvalidTaskError, TaskNotFoundError
from task_notes.models import Task, TaskUpdate

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Welcome to Task Notes"
WELCOME_CONTENT = "This is your first task note. You can edit, delete, or add new ones!"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or not value.strip()


class TaskStore:
    """Thread-safe in-memory task storage."""

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize an empty task store."""
        self._clock = clock or _utcnow
        self._id_factory = id_factory or _new_id
        self._lock = threading.RLock()
        # dicts keep insertion order, and replacing a value keeps its slot
        self._tasks: dict[str, Task] = {}
        self._issued_ids: set[str] = set()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def list_all(self) -> list[Task]:
        """Return all tasks in the order they were created."""
        with self._lock:
            return list(self._tasks.values())

    def get(self, task_id: str) -> Task:
        """Get a task by its ID."""
        with self._lock:
            task = self._tasks.get(task_id)
        if task is None:
            logger.debug("Task %r not found", task_id)
            raise TaskNotFoundError(task_id)
        return task

    def create(self, title: str | None, content: str | None) -> Task:
        """Create a new task and return it.

        Raises:
            InvalidTaskError: if ``title`` or ``content`` is missing or blank.
        """
        if _is_blank(title) or _is_blank(content):
            raise InvalidTaskError()

        with self._lock:
            now = self._clock()
            task = Task(
                id=self._allocate_id(),
                title=title,
                content=content,
                completed=False,
                created_at=now,
                updated_at=now,
            )
            self._tasks[task.id] = task

        logger.info("Created task %s", task.id)
        return task

    def update(self, task_id: str, patch: TaskUpdate) -> Task:
        """Apply the supplied fields of ``patch`` and refresh ``updated_at``.

        Values are applied as given, including empty strings; only creation
        checks that title and content are non-blank.

        Raises:
            TaskNotFoundError: if no task has ``task_id``.
        """
        changes = patch.changes()
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)

            # never move updated_at backwards, even if the clock does
            changes["updated_at"] = max(self._clock(), task.updated_at)
            updated = task.model_copy(update=changes)
            self._tasks[task_id] = updated

        logger.info("Updated task %s (%s)", task_id, ", ".join(sorted(changes)))
        return updated

    def delete(self, task_id: str) -> None:
        """Delete a task.

        Raises:
            TaskNotFoundError: if no task has ``task_id``.
        """
        with self._lock:
            if self._tasks.pop(task_id, None) is None:
                raise TaskNotFoundError(task_id)
        logger.info("Deleted task %s", task_id)

    def seed_welcome(self) -> Task:
        """Add the introductory note shown on a fresh start."""
        return self.create(WELCOME_TITLE, WELCOME_CONTENT)

    def clear(self) -> None:
        """Clear all tasks. Useful for testing.

        Ids issued before the clear stay reserved.
        """
        with self._lock:
            self._tasks.clear()

    def _allocate_id(self) -> str:
        # caller holds the lock
        task_id = self._id_factory()
        while task_id in self._issued_ids:
            logger.warning("Id factory returned used id %r, retrying", task_id)
            task_id = self._id_factory()
        self._issued_ids.add(task_id)
        return task_id
