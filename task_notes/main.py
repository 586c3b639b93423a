"""FastAPI application factory."""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from task_notes import __version__
from task_notes.config import Settings
from task_notes.errors import InvalidTaskError, TaskNotFoundError
from task_notes.models import ErrorResponse, HealthResponse, Task, TaskCreate, TaskUpdate
from task_notes.store import TaskStore

logger = logging.getLogger(__name__)

TASKS_PATH = "/api/tasks"

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_store(request: Request) -> TaskStore:
    """Return the store owned by the running application."""
    return request.app.state.store


def _error(status_code: int, message: str, details: list | None = None) -> JSONResponse:
    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def _not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.info("%s %s: task %r not found", request.method, request.url.path, exc.task_id)
    return _error(status.HTTP_404_NOT_FOUND, exc.message)


async def _invalid_task_handler(request: Request, exc: InvalidTaskError) -> JSONResponse:
    logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return _error(status.HTTP_400_BAD_REQUEST, exc.message)


async def _validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    logger.info("%s %s: invalid body %s", request.method, request.url.path, details)
    # a create body that does not validate has no usable title/content
    if request.method == "POST" and request.url.path == TASKS_PATH:
        return _error(status.HTTP_400_BAD_REQUEST, InvalidTaskError.message, details)
    return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body", details)


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build the API around ``store`` (a fresh one if not given)."""
    settings = settings or Settings.from_env()
    if store is None:
        store = TaskStore()
        if settings.seed_welcome:
            store.seed_welcome()

    app = FastAPI(
        title="Task Notes API",
        description="Create, edit, complete and delete task notes.",
        version=__version__,
    )
    app.state.store = store
    app.state.settings = settings

    wildcard = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if wildcard else list(settings.cors_origins),
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskNotFoundError, _not_found_handler)
    app.add_exception_handler(InvalidTaskError, _invalid_task_handler)
    app.add_exception_handler(RequestValidationError, _validation_handler)

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse()

    @app.get(TASKS_PATH, response_model=list[Task], tags=["Tasks"])
    def list_tasks(store: TaskStore = Depends(get_store)) -> list[Task]:
        """List all tasks in creation order."""
        return store.list_all()

    @app.post(
        TASKS_PATH,
        response_model=Task,
        status_code=status.HTTP_201_CREATED,
        responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}},
        tags=["Tasks"],
    )
    def create_task(
        data: TaskCreate | None = None,
        store: TaskStore = Depends(get_store),
    ) -> Task:
        """Create a new task."""
        data = data or TaskCreate()
        return store.create(data.title, data.content)

    @app.get(TASKS_PATH + "/{task_id}", response_model=Task, responses=NOT_FOUND, tags=["Tasks"])
    def get_task(task_id: str, store: TaskStore = Depends(get_store)) -> Task:
        """Get a specific task by ID."""
        return store.get(task_id)

    @app.put(TASKS_PATH + "/{task_id}", response_model=Task, responses=NOT_FOUND, tags=["Tasks"])
    def update_task(
        task_id: str,
        data: TaskUpdate | None = None,
        store: TaskStore = Depends(get_store),
    ) -> Task:
        """Update the supplied fields of an existing task."""
        return store.update(task_id, data or TaskUpdate())

    @app.delete(
        TASKS_PATH + "/{task_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses=NOT_FOUND,
        tags=["Tasks"],
    )
    def delete_task(task_id: str, store: TaskStore = Depends(get_store)) -> None:
        """Delete a task."""
        store.delete(task_id)

    return app
