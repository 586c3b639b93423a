"""Pydantic models for the Task Notes API.

Attributes use snake_case in Python and are serialized with the camelCase
names the frontend expects (``createdAt``, ``updatedAt``).
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TaskCreate(BaseModel):
    """Request body for creating a new task.

    Both fields are optional at the schema level; the store decides whether
    they are usable so that missing and blank values fail the same way.
    """

    title: str | None = Field(default=None, description="The task title")
    content: str | None = Field(default=None, description="The task body")


class TaskUpdate(BaseModel):
    """Partial update for an existing task.

    Only the fields present in the request are applied. An empty string or
    ``false`` counts as supplied; ``null`` is rejected.
    """

    title: str | None = Field(default=None, description="New title for the task")
    content: str | None = Field(default=None, description="New body for the task")
    completed: bool | None = Field(default=None, description="New completion status")

    @field_validator("title", "content", "completed")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict[str, Any]:
        """Return only the explicitly supplied fields."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class Task(BaseModel):
    """A task note."""

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="The task title")
    content: str = Field(..., description="The task body")
    completed: bool = Field(default=False, description="Whether the task has been completed")
    created_at: datetime = Field(..., description="When the task was created")
    updated_at: datetime = Field(..., description="When the task was last updated")


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "OK"
    message: str = "Task Notes API is running"


class ErrorResponse(BaseModel):
    """Body returned for every handled error."""

    error: str
    details: list[dict[str, Any]] | None = None
