"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from enum import Enum


class TodoStatus(str, Enum):
    """Completion filter values."""
    OPEN = "open"
    DONE = "done"


class Todo(BaseModel):
    """A todo item."""
    id: str = Field(..., description="Todo ID", examples=["cm4u1x2y30000k8l9a1b2c3d4"])
    title: str = Field(..., description="Todo title", examples=["Shopping list"])
    description: Optional[str] = Field(None, description="Todo description", examples=["Milk and bread"])
    completed: bool = Field(False, description="Completion status")
    created_at: str = Field(..., description="Created timestamp", examples=["2025-01-15T10:30:00"])
    updated_at: str = Field(..., description="Updated timestamp", examples=["2025-01-15T10:30:00"])


class TodoCreate(BaseModel):
    """Payload for creating a todo."""
    title: str = Field(..., min_length=1, description="Todo title")
    description: Optional[str] = Field(None, description="Todo description (optional)")


class TodoUpdate(BaseModel):
    """Payload for updating a todo. All fields are optional."""
    title: Optional[str] = Field(None, min_length=1, description="Todo title")
    description: Optional[str] = Field(None, description="Todo description")
    completed: Optional[bool] = Field(None, description="Completion status")

    @field_validator("title", "completed")
    @classmethod
    def not_null(cls, value):
        """Title and completed may be omitted but not set to null."""
        if value is None:
            raise ValueError("may not be null")
        return value


class PaginationInfo(BaseModel):
    """Pagination metadata."""
    page: int
    page_size: int
    total: int
    total_pages: int


class TodoListResponse(BaseModel):
    """Response for the todo list endpoint."""
    todos: list[Todo]
    pagination: PaginationInfo


class ErrorResponse(BaseModel):
    """Error payload."""
    error: str = Field(..., description="Error message", examples=["Todo not found"])
