"""
Pydantic models for the todolist application.

Defines the task record held by the in-memory task list, with validation
and the pending/completed state transition.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, Enum):
    """The two states a task can be in."""

    PENDING = "pending"
    COMPLETED = "completed"


class Task(BaseModel):
    """
    Represents a single to-do item.

    Tasks are immutable: a completion change produces a new Task carrying
    the same id, description and creation time.
    """

    id: UUID = Field(default_factory=uuid4, description="Stable identifier for the task")
    description: str = Field(..., min_length=1, description="Display text, stored as entered")
    is_completed: bool = Field(default=False, description="Whether the task is completed")

    # Timestamps
    created_at: datetime = Field(default_factory=_utcnow, description="Creation timestamp")
    completed_at: Optional[datetime] = Field(default=None, description="Completion timestamp")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174001",
                "description": "Buy milk",
                "is_completed": False,
                "created_at": "2025-01-14T10:00:00Z",
                "completed_at": None,
            }
        },
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """
        Reject descriptions made only of whitespace.

        The text itself is kept exactly as entered.

        Raises:
            ValueError: If the description is blank
        """
        if not v.strip():
            raise ValueError("Task description must not be blank")
        return v

    @computed_field
    @property
    def status(self) -> TaskStatus:
        """Current state of the task."""
        return TaskStatus.COMPLETED if self.is_completed else TaskStatus.PENDING

    def with_completed(self, completed: bool) -> "Task":
        """
        Return a copy of this task with the given completion state.

        Setting the state it already has returns an equal copy, keeping the
        original completion timestamp.

        Args:
            completed: New completion state

        Returns:
            Task with the same id, description and created_at
        """
        if completed == self.is_completed:
            return self.model_copy()
        return self.model_copy(
            update={
                "is_completed": completed,
                "completed_at": _utcnow() if completed else None,
            }
        )
